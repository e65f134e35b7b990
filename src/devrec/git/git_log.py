"""Git 로그 수집

작성자 이메일과 날짜 범위로 커밋을 가져오고, 브랜치 인식 모드에서는
각 커밋이 포함된 브랜치를 조회해 머지 여부를 판정합니다.
"""

import logging
from typing import List, Optional

from devrec.commit_collection.commit_data import CommitRecord, CommitWithBranch, deduplicate_by_hash
from devrec.config.settings import expand_tilde
from devrec.utils.date_range import DateRange

from .command_runner import GitCommandRunner

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "\x1f"
LOG_FORMAT = f"--pretty=format:%H{FIELD_SEPARATOR}%aI{FIELD_SEPARATOR}%s"


class GitCommandError(RuntimeError):
    """git 명령어 실패"""

    def __init__(self, message: str, repo_path: str):
        super().__init__(message)
        self.repo_path = repo_path


def parse_branch_list(branch_output: str) -> List[str]:
    """`git branch` 출력을 브랜치 이름 목록으로 변환"""
    branches = []
    for line in branch_output.split("\n"):
        name = line.strip()
        if name.startswith("* "):
            name = name[2:]
        if name:
            branches.append(name)
    return branches


class GitLogReader:
    """저장소에서 커밋 기록을 읽어오는 클래스"""

    def __init__(self, runner: Optional[GitCommandRunner] = None):
        self.runner = runner or GitCommandRunner()

    def get_git_log(self, author_emails: List[str], repo_path: str,
                    date_range: Optional[DateRange] = None) -> List[CommitRecord]:
        """작성자 이메일로 커밋 목록 조회

        Raises:
            GitCommandError: git log 실행 실패
        """
        return self._read_log(author_emails, expand_tilde(repo_path), date_range)

    def get_git_log_with_branches(self, author_emails: List[str], repo_path: str,
                                  branch_strategy: str, main_branch: str,
                                  date_range: Optional[DateRange] = None) -> List[CommitWithBranch]:
        """브랜치 정보가 포함된 커밋 목록 조회

        Args:
            branch_strategy: "all" 이면 모든 브랜치, "remote" 이면 원격 추적 브랜치만
            main_branch: 머지 여부 판정 기준 브랜치

        Raises:
            GitCommandError: git log 실행 실패
        """
        path = expand_tilde(repo_path)
        extra_args = ["--all"] if branch_strategy == "all" else ["--remotes"]
        commits = deduplicate_by_hash(
            self._read_log(author_emails, path, date_range, extra_args)
        )
        return [self._enrich_commit(commit, path, main_branch) for commit in commits]

    def _read_log(self, author_emails: List[str], repo_path: str,
                  date_range: Optional[DateRange],
                  extra_args: Optional[List[str]] = None) -> List[CommitRecord]:
        args = ["log", LOG_FORMAT]
        args.extend(f"--author={email}" for email in author_emails)
        if date_range:
            args.extend(date_range.to_git_args())
        args.extend(extra_args or [])

        result = self.runner.run(args, repo_path)
        if not result.success:
            raise GitCommandError(
                f"Error fetching git log: {result.error_message or 'unknown error'}",
                repo_path
            )

        commits = []
        for line in result.stdout.splitlines():
            parts = line.split(FIELD_SEPARATOR, 2)
            if len(parts) != 3:
                continue
            commit_hash, date, message = parts
            commits.append(CommitRecord(hash=commit_hash, date=date, message=message))

        logger.debug(f"{repo_path}: {len(commits)} commits")
        return commits

    def _enrich_commit(self, commit: CommitRecord, repo_path: str,
                       main_branch: str) -> CommitWithBranch:
        """커밋이 포함된 브랜치를 조회해 머지 여부와 주 브랜치 설정"""
        result = self.runner.run(["branch", "--all", "--contains", commit.hash], repo_path)
        if not result.success:
            logger.debug(f"브랜치 조회 실패: {commit.hash} - {result.error_message}")
            return CommitWithBranch.unenriched(commit)

        branches = parse_branch_list(result.stdout)
        is_merged = any(
            branch == main_branch or branch == f"remotes/origin/{main_branch}"
            for branch in branches
        )

        primary_branch = None
        if not is_merged:
            primary_branch = next(
                (b for b in branches if "remotes/" not in b and b != main_branch),
                None
            )

        return CommitWithBranch(
            hash=commit.hash,
            date=commit.date,
            message=commit.message,
            branches=branches,
            is_merged=is_merged,
            primary_branch=primary_branch
        )
