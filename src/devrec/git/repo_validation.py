"""저장소 경로 검증과 경고 출력"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from devrec.config.settings import expand_tilde

logger = logging.getLogger(__name__)


class RepoValidationFailure(Enum):
    """저장소 검증 실패 사유"""
    NOT_FOUND = "not-found"
    NOT_GIT = "not-git"
    NO_PERMISSION = "no-permission"


@dataclass(frozen=True)
class RepoValidationResult:
    valid: bool
    reason: Optional[RepoValidationFailure] = None


def validate_repo_path(repo_path: str) -> RepoValidationResult:
    """경로가 존재하고 읽을 수 있는 git 저장소인지 확인"""
    path = expand_tilde(repo_path)

    if not os.path.exists(path):
        return RepoValidationResult(False, RepoValidationFailure.NOT_FOUND)
    if not os.access(path, os.R_OK):
        return RepoValidationResult(False, RepoValidationFailure.NO_PERMISSION)
    if not os.path.isdir(path):
        return RepoValidationResult(False, RepoValidationFailure.NOT_FOUND)
    if not os.path.exists(os.path.join(path, ".git")):
        return RepoValidationResult(False, RepoValidationFailure.NOT_GIT)

    return RepoValidationResult(True)


class RepoWarningLogger(Protocol):
    """건너뛴 저장소 경고 출력 인터페이스"""

    def warn(self, repo_name: str, repo_path: str, reason: RepoValidationFailure) -> None:
        ...


def format_repo_warning(repo_name: str, repo_path: str,
                        reason: RepoValidationFailure) -> str:
    if reason is RepoValidationFailure.NOT_GIT:
        return f"Path '{repo_path}' for repo '{repo_name}' is not a git repository"
    if reason is RepoValidationFailure.NO_PERMISSION:
        return f"No permission to read repo '{repo_name}' at path: {repo_path}"
    return f"Repo '{repo_name}' not found at path: {repo_path}"


class LoggingRepoWarningLogger:
    """logging 모듈로 경고를 남기는 기본 구현"""

    def __init__(self, target: Optional[logging.Logger] = None):
        self.logger = target or logger

    def warn(self, repo_name: str, repo_path: str, reason: RepoValidationFailure) -> None:
        self.logger.warning(format_repo_warning(repo_name, repo_path, reason))
