"""카테고리별 커밋 묶음과 중요도/머지 상태 기준 4분할 구조"""

from dataclasses import dataclass, field
from typing import Dict, List, Iterator, Tuple

from .commit_data import CommitEntry

# 카테고리 이름 -> 수집 순서대로의 커밋 목록
CategorizedCommits = Dict[str, List[CommitEntry]]


def merge_categorized_commits(target: CategorizedCommits, source: CategorizedCommits) -> None:
    """source 의 커밋을 target 의 같은 카테고리 뒤에 이어 붙임 (버킷은 처음 볼 때 생성)"""
    for category, commits in source.items():
        target.setdefault(category, []).extend(commits)


def count_categorized_commits(categorized: CategorizedCommits) -> int:
    """카테고리별 커밋 묶음의 전체 커밋 수"""
    return sum(len(commits) for commits in categorized.values())


@dataclass
class MergedUnmergedCommits:
    """머지/미머지로 나뉜 카테고리별 커밋"""
    merged: CategorizedCommits = field(default_factory=dict)
    unmerged: CategorizedCommits = field(default_factory=dict)

    def combined(self) -> CategorizedCommits:
        """merged 다음 unmerged 순서로 합친 새 묶음"""
        result: CategorizedCommits = {}
        merge_categorized_commits(result, self.merged)
        merge_categorized_commits(result, self.unmerged)
        return result

    def has_commits(self) -> bool:
        return any(self.merged.values()) or any(self.unmerged.values())


@dataclass
class TieredCommits:
    """핵심 기여 / 기타 작업 x 머지 / 미머지 4개 버킷"""
    key_contributions: MergedUnmergedCommits = field(default_factory=MergedUnmergedCommits)
    other_work: MergedUnmergedCommits = field(default_factory=MergedUnmergedCommits)

    @classmethod
    def empty(cls) -> 'TieredCommits':
        return cls()

    def buckets(self) -> Iterator[Tuple[str, str, CategorizedCommits]]:
        """(tier, merge_state, 버킷) 을 고정된 순서로 순회"""
        yield "key_contributions", "merged", self.key_contributions.merged
        yield "key_contributions", "unmerged", self.key_contributions.unmerged
        yield "other_work", "merged", self.other_work.merged
        yield "other_work", "unmerged", self.other_work.unmerged
