"""devrec 단위 테스트를 위한 pytest 설정"""

import tempfile
from pathlib import Path
from typing import Generator, List, Optional
import pytest

from devrec.commit_collection.commit_data import CommitEntry, CommitRecord, CommitWithBranch
from devrec.config.settings import DevrecConfig


def pytest_configure(config):
    """pytest 설정을 구성합니다. 단위/통합 테스트용 마커들을 등록합니다."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """테스트용 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_config():
    """저장소 이름 목록으로 DevrecConfig 생성"""
    def _make(repo_names: List[str], **overrides) -> DevrecConfig:
        data = {
            "author_emails": ["dev@example.com"],
            "repos": [{"name": name, "path": f"/repos/{name}"} for name in repo_names],
        }
        data.update(overrides)
        return DevrecConfig(**data)
    return _make


@pytest.fixture
def make_branch_commit():
    """CommitWithBranch 생성 헬퍼"""
    def _make(message: str, is_merged: bool = False, commit_hash: Optional[str] = None,
              branches: Optional[List[str]] = None,
              primary_branch: Optional[str] = None) -> CommitWithBranch:
        return CommitWithBranch(
            hash=commit_hash or f"{abs(hash(message)):040x}"[:40],
            date="2024-01-15T10:30:00+00:00",
            message=message,
            branches=branches if branches is not None else (["main"] if is_merged else []),
            is_merged=is_merged,
            primary_branch=primary_branch,
        )
    return _make


@pytest.fixture
def sample_record() -> CommitRecord:
    return CommitRecord(
        hash="a1b2c3d4e5f6a7b8c9d0a1b2c3d4e5f6a7b8c9d0",
        date="2024-01-15T10:30:00+00:00",
        message="feat: add login",
    )


@pytest.fixture
def sample_categorized():
    """두 저장소에 걸친 카테고리별 커밋"""
    def entry(commit_hash: str, message: str, repo: str, branch: Optional[str] = None) -> CommitEntry:
        return CommitEntry(
            hash=commit_hash * 8,
            message=message,
            date="2024-01-15T10:30:00+00:00",
            repo_name=repo,
            branch=branch,
        )

    return {
        "Feature": [
            entry("aaaaa", "feat: add login", "api"),
            entry("bbbbb", "feat: add dashboard", "web"),
        ],
        "Bug": [
            entry("ccccc", "fix: null pointer", "api"),
        ],
        "Chore": [
            entry("ddddd", "chore: bump deps", "web", branch="deps"),
        ],
    }
