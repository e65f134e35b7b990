from dataclasses import dataclass, field
from typing import Set


@dataclass
class SummaryStats:
    """요약 통계 (현재 커밋 집합에서 매번 다시 계산)"""
    total_commits: int = 0
    merged_commits: int = 0
    unmerged_commits: int = 0
    repos: Set[str] = field(default_factory=set)


@dataclass
class TieredStats(SummaryStats):
    """핵심 기여 수가 추가된 요약 통계"""
    key_contribution_count: int = 0
