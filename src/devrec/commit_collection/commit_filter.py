"""수집 결과 필터링과 통계 계산"""

from typing import Dict, Optional, Set

from .category_filter import resolve_category_filter
from .summary_stats import SummaryStats, TieredStats
from .tiered_commits import (
    CategorizedCommits,
    MergedUnmergedCommits,
    TieredCommits,
    count_categorized_commits,
)


def filter_commits(categorized: CategorizedCommits,
                   repo: Optional[str] = None,
                   category: Optional[str] = None) -> CategorizedCommits:
    """저장소 이름 / 카테고리로 필터링 (두 조건은 AND)

    필터가 없으면 입력을 그대로(복사 없이) 반환합니다.
    필터링 후 비어버린 카테고리는 결과에 포함되지 않습니다.

    Raises:
        CategoryFilterError: category 를 해석할 수 없는 경우
    """
    if not repo and not category:
        return categorized

    resolved_category = resolve_category_filter(category) if category else None

    filtered: CategorizedCommits = {}
    for name, commits in categorized.items():
        if resolved_category and name != resolved_category:
            continue

        matching = [c for c in commits if c.repo_name == repo] if repo else commits
        if matching:
            filtered[name] = matching

    return filtered


def filter_tiered_commits(tiered: TieredCommits,
                          repo: Optional[str] = None,
                          category: Optional[str] = None) -> TieredCommits:
    """4개 버킷 각각에 filter_commits 적용"""
    return TieredCommits(
        key_contributions=MergedUnmergedCommits(
            merged=filter_commits(tiered.key_contributions.merged, repo, category),
            unmerged=filter_commits(tiered.key_contributions.unmerged, repo, category),
        ),
        other_work=MergedUnmergedCommits(
            merged=filter_commits(tiered.other_work.merged, repo, category),
            unmerged=filter_commits(tiered.other_work.unmerged, repo, category),
        ),
    )


def calculate_stats_from_filtered(merged: CategorizedCommits,
                                  unmerged: CategorizedCommits,
                                  repos: Set[str]) -> SummaryStats:
    """필터링된 커밋으로 통계 재계산

    repos 는 필터 적용 전 수집에 성공한 저장소 집합을 그대로 사용합니다.
    """
    merged_count = count_categorized_commits(merged)
    unmerged_count = count_categorized_commits(unmerged)

    return SummaryStats(
        total_commits=merged_count + unmerged_count,
        merged_commits=merged_count,
        unmerged_commits=unmerged_count,
        repos=repos,
    )


def calculate_tiered_stats(tiered: TieredCommits, repos: Set[str]) -> TieredStats:
    counts: Dict[str, int] = {
        f"{tier}.{state}": count_categorized_commits(bucket)
        for tier, state, bucket in tiered.buckets()
    }
    key_count = counts["key_contributions.merged"] + counts["key_contributions.unmerged"]
    merged_count = counts["key_contributions.merged"] + counts["other_work.merged"]
    unmerged_count = counts["key_contributions.unmerged"] + counts["other_work.unmerged"]

    return TieredStats(
        total_commits=merged_count + unmerged_count,
        merged_commits=merged_count,
        unmerged_commits=unmerged_count,
        repos=repos,
        key_contribution_count=key_count,
    )
