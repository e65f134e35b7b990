"""커밋 수집 및 분류 패키지

여러 git 저장소의 커밋을 카테고리와 중요도로 분류하고,
필터링과 요약 통계 계산 기능을 제공합니다.
"""

from .commit_data import CommitRecord, CommitWithBranch, CommitEntry
from .importance_level import ImportanceLevel
from .tiered_commits import CategorizedCommits, MergedUnmergedCommits, TieredCommits
from .summary_stats import SummaryStats, TieredStats
from .category_patterns import (
    CATEGORY_NAMES,
    OTHER_CATEGORY,
    categorize_commit,
    extract_clean_message,
    is_merge_commit,
)
from .category_filter import (
    CategoryFilterError,
    UnknownCategoryFilterError,
    AmbiguousCategoryFilterError,
    resolve_category_filter,
)
from .importance import (
    detect_importance_by_keyword,
    detect_importance_by_merge_status,
    is_highlight_match,
    score_commit,
    partition_by_importance,
)
from .commit_filter import (
    filter_commits,
    filter_tiered_commits,
    calculate_stats_from_filtered,
    calculate_tiered_stats,
)
from .commit_collector import (
    CommitCollector,
    TieredCollectionResult,
    fetch_and_categorize,
    fetch_and_categorize_with_branches,
)

__all__ = [
    'CommitRecord',
    'CommitWithBranch',
    'CommitEntry',
    'ImportanceLevel',
    'CategorizedCommits',
    'MergedUnmergedCommits',
    'TieredCommits',
    'SummaryStats',
    'TieredStats',
    'CATEGORY_NAMES',
    'OTHER_CATEGORY',
    'categorize_commit',
    'extract_clean_message',
    'is_merge_commit',
    'CategoryFilterError',
    'UnknownCategoryFilterError',
    'AmbiguousCategoryFilterError',
    'resolve_category_filter',
    'detect_importance_by_keyword',
    'detect_importance_by_merge_status',
    'is_highlight_match',
    'score_commit',
    'partition_by_importance',
    'filter_commits',
    'filter_tiered_commits',
    'calculate_stats_from_filtered',
    'calculate_tiered_stats',
    'CommitCollector',
    'TieredCollectionResult',
    'fetch_and_categorize',
    'fetch_and_categorize_with_branches',
]
