"""devrec: 여러 git 저장소의 커밋을 모아 개발 로그를 만드는 CLI"""

__version__ = "0.4.0"
