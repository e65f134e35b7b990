"""카테고리 우선 / 저장소 우선 섹션 생성"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Set, Tuple

from devrec.commit_collection.commit_data import CommitEntry
from devrec.commit_collection.tiered_commits import CategorizedCommits


@dataclass
class SectionFormatter:
    """출력 형식별 헤더/커밋/구분선 생성 함수 묶음"""
    level1_header: Callable[[str], str]
    level2_header: Callable[[str], str]
    commit_line: Callable[[CommitEntry], str]
    section_separator: Callable[[], str]


def calculate_stats(categorized: CategorizedCommits) -> Tuple[int, Set[str]]:
    """(전체 커밋 수, 커밋이 있는 저장소 이름 집합)"""
    commits = [commit for group in categorized.values() for commit in group]
    return len(commits), {commit.repo_name for commit in commits}


def group_commits_by_repo(commits: List[CommitEntry]) -> Dict[str, List[CommitEntry]]:
    grouped: Dict[str, List[CommitEntry]] = {}
    for commit in commits:
        grouped.setdefault(commit.repo_name, []).append(commit)
    return grouped


def group_by_repo(categorized: CategorizedCommits) -> Dict[str, CategorizedCommits]:
    """저장소 -> 카테고리 -> 커밋 목록으로 재구성"""
    by_repo: Dict[str, CategorizedCommits] = {}
    for category, commits in categorized.items():
        for commit in commits:
            by_repo.setdefault(commit.repo_name, {}).setdefault(category, []).append(commit)
    return by_repo


def generate_category_first_sections(categorized: CategorizedCommits,
                                     formatter: SectionFormatter) -> str:
    output = ""
    for category, commits in categorized.items():
        output += formatter.level1_header(category)
        for repo_name, repo_commits in group_commits_by_repo(commits).items():
            output += formatter.level2_header(repo_name)
            output += "".join(formatter.commit_line(c) for c in repo_commits)
        output += formatter.section_separator()
    return output


def generate_repo_first_sections(categorized: CategorizedCommits,
                                 formatter: SectionFormatter) -> str:
    output = ""
    for repo_name, categories in group_by_repo(categorized).items():
        output += formatter.level1_header(repo_name)
        for category, commits in categories.items():
            output += formatter.level2_header(category)
            output += "".join(formatter.commit_line(c) for c in commits)
        output += formatter.section_separator()
    return output


def generate_sections(categorized: CategorizedCommits, formatter: SectionFormatter,
                      group_by: str) -> str:
    if group_by == "repo":
        return generate_repo_first_sections(categorized, formatter)
    return generate_category_first_sections(categorized, formatter)
