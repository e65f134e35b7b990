"""커밋 메시지 카테고리 분류 모듈

Conventional Commits 형식의 접두어(`feat:`, `fix/`, `docs(scope):` 등)로
커밋 메시지를 카테고리에 매핑합니다.
"""

import re
from typing import List, Optional, Pattern, Tuple

from .commit_data import CommitEntry
from .tiered_commits import CategorizedCommits

OTHER_CATEGORY = "Other"

# 선언 순서대로 평가하며 처음 일치한 카테고리가 선택됩니다
CATEGORY_PATTERNS: List[Tuple[str, List[Pattern[str]]]] = [
    ("Feature", [
        re.compile(r'^feat[/:]', re.IGNORECASE),
        re.compile(r'^feature[/:]', re.IGNORECASE),
        re.compile(r'^feat\(', re.IGNORECASE),
    ]),
    ("Bug", [
        re.compile(r'^fix[/:]', re.IGNORECASE),
        re.compile(r'^bugfix[/:]', re.IGNORECASE),
        re.compile(r'^fix\(', re.IGNORECASE),
    ]),
    ("Refactor", [
        re.compile(r'^refactor[/:]', re.IGNORECASE),
        re.compile(r'^refactor\(', re.IGNORECASE),
    ]),
    ("Test", [
        re.compile(r'^test[/:]', re.IGNORECASE),
        re.compile(r'^test\(', re.IGNORECASE),
    ]),
    ("Chore", [
        re.compile(r'^chore[/:]', re.IGNORECASE),
        re.compile(r'^chore\(', re.IGNORECASE),
    ]),
    ("Documentation", [
        re.compile(r'^docs[/:]', re.IGNORECASE),
        re.compile(r'^documentation[/:]', re.IGNORECASE),
        re.compile(r'^docs\(', re.IGNORECASE),
    ]),
    ("CI", [
        re.compile(r'^ci[/:]', re.IGNORECASE),
        re.compile(r'^ci\(', re.IGNORECASE),
    ]),
]

CATEGORY_NAMES: List[str] = [name for name, _ in CATEGORY_PATTERNS]

# Jira 형식: Resolve TICKET-123 "message" / Resolve TICKET-123 message
_JIRA_WITH_QUOTES = re.compile(r'^resolve\s+[\da-z]+-\d+\s+"(.+)"$', re.IGNORECASE)
_JIRA_WITHOUT_QUOTES = re.compile(r'^resolve\s+[\da-z]+-\d+\s+(.+)$', re.IGNORECASE)
_MERGE_BRANCH = re.compile(r'^merge branch', re.IGNORECASE)


def is_merge_commit(message: str) -> bool:
    """'Merge branch ...' 로 시작하는 머지 커밋인지 확인"""
    return _MERGE_BRANCH.match(message) is not None


def extract_clean_message(message: str) -> str:
    """티켓 시스템 형식으로 감싼 커밋에서 실제 메시지 추출

    따옴표 형식을 먼저 시도하고, 일치하지 않으면 원본을 그대로 반환합니다.
    """
    quoted = _JIRA_WITH_QUOTES.match(message)
    if quoted:
        return quoted.group(1)

    unquoted = _JIRA_WITHOUT_QUOTES.match(message)
    if unquoted:
        return unquoted.group(1)

    return message


def categorize_commit(message: str) -> Optional[str]:
    """커밋 메시지의 카테고리 반환

    Returns:
        카테고리 이름, 일치하는 패턴이 없으면 "Other", 머지 커밋이면 None
    """
    if is_merge_commit(message):
        return None

    clean_message = extract_clean_message(message)

    for category, patterns in CATEGORY_PATTERNS:
        for pattern in patterns:
            if pattern.search(clean_message):
                return category

    return OTHER_CATEGORY


def categorize_commits_batch(commits: List[CommitEntry]) -> CategorizedCommits:
    """커밋 목록을 카테고리별로 묶음 (머지 커밋은 제외)"""
    categorized: CategorizedCommits = {}

    for commit in commits:
        category = categorize_commit(commit.message)
        if category is None:
            continue
        categorized.setdefault(category, []).append(commit)

    return categorized
