"""커밋 중요도 판정 모듈

메시지 키워드와 메인 브랜치 머지 여부 두 신호를 조합해 중요도를 계산합니다.
"""

import re
from typing import Dict, List, Optional, Pattern, Sequence, Tuple

from .commit_data import CommitWithBranch
from .importance_level import ImportanceLevel

# high -> medium 순서로 평가, 어느 쪽에도 해당하지 않으면 low
IMPORTANCE_PATTERNS: List[Tuple[ImportanceLevel, List[Pattern[str]]]] = [
    (ImportanceLevel.HIGH, [
        re.compile(r'security', re.IGNORECASE),
        re.compile(r'critical', re.IGNORECASE),
        re.compile(r'breaking', re.IGNORECASE),
        re.compile(r'hotfix', re.IGNORECASE),
        re.compile(r'vulnerability', re.IGNORECASE),
        re.compile(r'urgent', re.IGNORECASE),
    ]),
    (ImportanceLevel.MEDIUM, [
        re.compile(r'performance', re.IGNORECASE),
        re.compile(r'migration', re.IGNORECASE),
        re.compile(r'deprecat(e|ed|ion)', re.IGNORECASE),
        re.compile(r'regression', re.IGNORECASE),
    ]),
]


def detect_importance_by_keyword(message: str) -> ImportanceLevel:
    """메시지 어디에든 있는 키워드로 중요도 판정 (대소문자 무시)"""
    for importance, patterns in IMPORTANCE_PATTERNS:
        for pattern in patterns:
            if pattern.search(message):
                return importance

    return ImportanceLevel.LOW


def detect_importance_by_merge_status(is_merged: bool) -> ImportanceLevel:
    """머지된 커밋은 medium, 아니면 low"""
    return ImportanceLevel.MEDIUM if is_merged else ImportanceLevel.LOW


def is_highlight_match(commit: CommitWithBranch, highlight: str) -> bool:
    """메시지, primary_branch, 브랜치 목록 중 하나라도 highlight 를 포함하는지 확인"""
    lower = highlight.lower()

    if lower in commit.message.lower():
        return True
    if commit.primary_branch and lower in commit.primary_branch.lower():
        return True

    return any(lower in branch.lower() for branch in commit.branches)


def score_commit(commit: CommitWithBranch, highlight: Optional[str] = None) -> ImportanceLevel:
    """키워드와 머지 여부를 조합한 최종 중요도

    | 키워드 | 머지 | 결과   |
    |--------|------|--------|
    | high   | -    | high   |
    | medium | O    | high   |
    | medium | X    | medium |
    | low    | O    | medium |
    | low    | X    | low    |

    highlight 가 일치하면 다른 규칙과 관계없이 high 입니다.
    """
    if highlight and is_highlight_match(commit, highlight):
        return ImportanceLevel.HIGH

    keyword_score = detect_importance_by_keyword(commit.message)

    if keyword_score is ImportanceLevel.HIGH:
        return ImportanceLevel.HIGH
    if keyword_score is ImportanceLevel.MEDIUM:
        return ImportanceLevel.HIGH if commit.is_merged else ImportanceLevel.MEDIUM

    return detect_importance_by_merge_status(commit.is_merged)


def partition_by_importance(commits: Sequence[CommitWithBranch],
                            highlight: Optional[str] = None) -> Dict[str, List[CommitWithBranch]]:
    """커밋을 key(high+medium) / other(low) 로 분할 (입력 순서 유지)"""
    key: List[CommitWithBranch] = []
    other: List[CommitWithBranch] = []

    for commit in commits:
        if score_commit(commit, highlight).is_key:
            key.append(commit)
        else:
            other.append(commit)

    return {"key": key, "other": other}
