"""repo_validation.py 단위 테스트"""

import logging
import os

import pytest

from devrec.git.repo_validation import (
    LoggingRepoWarningLogger,
    RepoValidationFailure,
    format_repo_warning,
    validate_repo_path,
)


@pytest.mark.unit
class TestValidateRepoPath:
    """저장소 경로 검증 테스트"""

    def test_valid_git_repo(self, temp_dir):
        (temp_dir / ".git").mkdir()

        result = validate_repo_path(str(temp_dir))

        assert result.valid is True
        assert result.reason is None

    def test_missing_path(self, temp_dir):
        result = validate_repo_path(str(temp_dir / "nope"))

        assert result.valid is False
        assert result.reason is RepoValidationFailure.NOT_FOUND

    def test_directory_without_git(self, temp_dir):
        result = validate_repo_path(str(temp_dir))

        assert result.reason is RepoValidationFailure.NOT_GIT

    def test_file_is_not_a_repo(self, temp_dir):
        file_path = temp_dir / "file.txt"
        file_path.write_text("x")

        result = validate_repo_path(str(file_path))

        assert result.reason is RepoValidationFailure.NOT_FOUND

    @pytest.mark.skipif(hasattr(os, "geteuid") and os.geteuid() == 0,
                        reason="root 는 권한 검사를 우회함")
    def test_unreadable_directory(self, temp_dir):
        locked = temp_dir / "locked"
        locked.mkdir()
        locked.chmod(0)
        try:
            result = validate_repo_path(str(locked))
        finally:
            locked.chmod(0o755)

        assert result.reason is RepoValidationFailure.NO_PERMISSION


@pytest.mark.unit
class TestRepoWarnings:
    """경고 메시지 테스트"""

    @pytest.mark.parametrize("reason,expected", [
        (RepoValidationFailure.NOT_FOUND, "Repo 'api' not found at path: /repos/api"),
        (RepoValidationFailure.NOT_GIT, "Path '/repos/api' for repo 'api' is not a git repository"),
        (RepoValidationFailure.NO_PERMISSION, "No permission to read repo 'api' at path: /repos/api"),
    ])
    def test_format(self, reason, expected):
        assert format_repo_warning("api", "/repos/api", reason) == expected

    def test_logging_warning_logger(self, caplog):
        target = logging.getLogger("devrec.test.warnings")

        with caplog.at_level(logging.WARNING, logger="devrec.test.warnings"):
            LoggingRepoWarningLogger(target).warn("api", "/repos/api", RepoValidationFailure.NOT_GIT)

        assert caplog.records[-1].levelno == logging.WARNING
        assert caplog.records[-1].getMessage() == (
            "Path '/repos/api' for repo 'api' is not a git repository"
        )
