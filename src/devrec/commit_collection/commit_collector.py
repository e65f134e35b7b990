import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List, Optional

from .commit_data import CommitEntry, CommitWithBranch, deduplicate_by_hash
from .category_patterns import categorize_commits_batch
from .importance import partition_by_importance
from .summary_stats import TieredStats
from .tiered_commits import (
    CategorizedCommits,
    MergedUnmergedCommits,
    TieredCommits,
    merge_categorized_commits,
)
from .commit_filter import calculate_tiered_stats
from devrec.config.settings import DevrecConfig, RepoConfig
from devrec.utils.date_range import DateRange

if TYPE_CHECKING:
    from devrec.git.git_log import GitLogReader
    from devrec.git.repo_validation import RepoValidationResult, RepoWarningLogger


@dataclass
class TieredCollectionResult:
    """브랜치 인식 모드 수집 결과"""
    tiered: TieredCommits
    stats: TieredStats


class CommitCollector:
    """설정된 모든 저장소에서 커밋을 수집하고 카테고리별로 분류하는 클래스

    저장소는 설정 순서대로 하나씩 처리하며, 한 저장소의 검증/조회 실패는
    경고 또는 에러 로그만 남기고 다음 저장소로 넘어갑니다.
    """

    def __init__(self, config: DevrecConfig,
                 log_reader: Optional["GitLogReader"] = None,
                 validator: Optional[Callable[[str], "RepoValidationResult"]] = None,
                 warning_logger: Optional["RepoWarningLogger"] = None):
        """
        Args:
            config: 설정 정보 (author_emails, repos, main_branch, branch_strategy 포함)
            log_reader: git 로그 조회기
            validator: 저장소 경로 검증 함수
            warning_logger: 건너뛴 저장소 경고 출력기
        """
        # devrec.git 이 commit_data 를 import 하므로 기본 구현은 생성 시점에 로드
        from devrec.git.git_log import GitLogReader
        from devrec.git.repo_validation import LoggingRepoWarningLogger, validate_repo_path

        self.config = config
        self.repo_configs = config.repos
        self.log_reader = log_reader or GitLogReader()
        self.validator = validator or validate_repo_path
        self.warning_logger = warning_logger or LoggingRepoWarningLogger()
        self.logger = logging.getLogger(__name__)

    def fetch_and_categorize(self, date_range: Optional[DateRange] = None) -> CategorizedCommits:
        """모든 저장소의 커밋을 카테고리별로 묶어서 반환

        Args:
            date_range: 조회 기간 (None 이면 전체 기간)

        Returns:
            CategorizedCommits: 카테고리 -> 커밋 목록 (저장소 설정 순서 유지)
        """
        categorized: CategorizedCommits = {}

        for repo in self.repo_configs:
            if not self._is_valid_repo(repo):
                continue

            try:
                log = self.log_reader.get_git_log(
                    self.config.author_emails, repo.path, date_range
                )
            except Exception as e:
                self.logger.error(f"Failed to fetch git log for {repo.name}: {e}")
                continue

            entries = [CommitEntry.from_commit(commit, repo.name) for commit in log]
            merge_categorized_commits(categorized, categorize_commits_batch(entries))
            self.logger.info(f"저장소 처리 완료: {repo.name} ({len(entries)}개 커밋)")

        return categorized

    def fetch_and_categorize_with_branches(self, date_range: Optional[DateRange] = None,
                                           highlight: Optional[str] = None) -> TieredCollectionResult:
        """브랜치 정보를 포함해 커밋을 수집하고 중요도/머지 상태로 4분할

        Args:
            date_range: 조회 기간 (None 이면 전체 기간)
            highlight: 일치하는 커밋을 high 로 올리는 문자열

        Returns:
            TieredCollectionResult: 4분할된 커밋과 통계
        """
        tiered = TieredCommits.empty()
        repos = set()

        for repo in self.repo_configs:
            if not self._is_valid_repo(repo):
                continue

            start_time = time.time()
            try:
                log = self.log_reader.get_git_log_with_branches(
                    self.config.author_emails,
                    repo.path,
                    self.config.branch_strategy,
                    self.config.main_branch_for(repo),
                    date_range,
                )
            except Exception as e:
                self.logger.error(f"Failed to fetch git log for {repo.name}: {e}")
                continue

            repos.add(repo.name)

            partition = partition_by_importance(deduplicate_by_hash(log), highlight)
            self._accumulate_partition(partition["key"], repo.name, tiered.key_contributions)
            self._accumulate_partition(partition["other"], repo.name, tiered.other_work)

            self.logger.info(
                f"저장소 처리 완료: {repo.name} "
                f"(핵심 {len(partition['key'])}개, 기타 {len(partition['other'])}개, "
                f"{time.time() - start_time:.2f}초)"
            )

        return TieredCollectionResult(tiered=tiered, stats=calculate_tiered_stats(tiered, repos))

    def _is_valid_repo(self, repo: RepoConfig) -> bool:
        validation = self.validator(repo.path)
        if validation.valid:
            return True

        self.warning_logger.warn(repo.name, repo.path, validation.reason)
        return False

    @staticmethod
    def _accumulate_partition(commits: List[CommitWithBranch], repo_name: str,
                              target: MergedUnmergedCommits) -> None:
        """머지/미머지로 나눈 뒤 카테고리 분류해서 target 에 누적"""
        merged = [CommitEntry.from_branch_commit(c, repo_name) for c in commits if c.is_merged]
        unmerged = [CommitEntry.from_branch_commit(c, repo_name) for c in commits if not c.is_merged]

        merge_categorized_commits(target.merged, categorize_commits_batch(merged))
        merge_categorized_commits(target.unmerged, categorize_commits_batch(unmerged))


def fetch_and_categorize(config: DevrecConfig, date_range: Optional[DateRange] = None,
                         **collaborators) -> CategorizedCommits:
    return CommitCollector(config, **collaborators).fetch_and_categorize(date_range)


def fetch_and_categorize_with_branches(config: DevrecConfig,
                                       date_range: Optional[DateRange] = None,
                                       highlight: Optional[str] = None,
                                       **collaborators) -> TieredCollectionResult:
    collector = CommitCollector(config, **collaborators)
    return collector.fetch_and_categorize_with_branches(date_range, highlight)
