"""출력 관련 상수"""

GIT_SHORT_HASH_LENGTH = 7

REPORT_FOOTER = "_Generated by devrec_"
