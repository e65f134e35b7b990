"""Git 저장소 접근 (로그 수집, 경로 검증)"""

from .command_runner import GitCommandRunner, GitCommandResult
from .git_log import GitLogReader, GitCommandError
from .repo_validation import (
    RepoValidationFailure,
    RepoValidationResult,
    RepoWarningLogger,
    LoggingRepoWarningLogger,
    validate_repo_path,
)

__all__ = [
    'GitCommandRunner',
    'GitCommandResult',
    'GitLogReader',
    'GitCommandError',
    'RepoValidationFailure',
    'RepoValidationResult',
    'RepoWarningLogger',
    'LoggingRepoWarningLogger',
    'validate_repo_path',
]
