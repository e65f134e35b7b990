from dataclasses import dataclass, asdict, field
from typing import List, Dict, Any, Optional, Sequence, TypeVar

T = TypeVar("T")


def deduplicate_by_hash(commits: Sequence[T]) -> List[T]:
    """해시 기준 중복 제거 (처음 나온 순서 유지)"""
    seen = set()
    unique: List[T] = []
    for commit in commits:
        if commit.hash in seen:
            continue
        seen.add(commit.hash)
        unique.append(commit)
    return unique


@dataclass(frozen=True)
class CommitRecord:
    """git log에서 가져온 원본 커밋"""
    hash: str
    date: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        """JSON 직렬화를 위한 딕셔너리 변환"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CommitRecord':
        """딕셔너리에서 CommitRecord 객체 생성"""
        return cls(
            hash=data['hash'],
            date=data['date'],
            message=data['message']
        )


@dataclass(frozen=True)
class CommitWithBranch:
    """브랜치 정보가 추가된 커밋

    is_merged 는 메인 브랜치(또는 원격 추적 브랜치)가 branches 에 있을 때만 True,
    primary_branch 는 머지되지 않은 커밋에만 설정됩니다.
    """
    hash: str
    date: str
    message: str
    branches: List[str] = field(default_factory=list)
    is_merged: bool = False
    primary_branch: Optional[str] = None

    @classmethod
    def unenriched(cls, commit: CommitRecord) -> 'CommitWithBranch':
        """브랜치 조회 실패 시 사용하는 기본값 (머지 안 됨, 브랜치 없음)"""
        return cls(hash=commit.hash, date=commit.date, message=commit.message)

    def to_dict(self) -> Dict[str, Any]:
        """JSON 직렬화를 위한 딕셔너리 변환"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CommitWithBranch':
        """딕셔너리에서 CommitWithBranch 객체 생성"""
        return cls(
            hash=data['hash'],
            date=data['date'],
            message=data['message'],
            branches=list(data.get('branches', [])),
            is_merged=data.get('is_merged', False),
            primary_branch=data.get('primary_branch')
        )


@dataclass(frozen=True)
class CommitEntry:
    """카테고리 분류용 커밋 항목 (저장소 이름 포함)"""
    hash: str
    message: str
    date: str
    repo_name: str
    branch: Optional[str] = None

    @classmethod
    def from_commit(cls, commit: CommitRecord, repo_name: str) -> 'CommitEntry':
        return cls(
            hash=commit.hash,
            message=commit.message,
            date=commit.date,
            repo_name=repo_name
        )

    @classmethod
    def from_branch_commit(cls, commit: CommitWithBranch, repo_name: str) -> 'CommitEntry':
        return cls(
            hash=commit.hash,
            message=commit.message,
            date=commit.date,
            repo_name=repo_name,
            branch=commit.primary_branch
        )

    def to_dict(self) -> Dict[str, Any]:
        """JSON 직렬화를 위한 딕셔너리 변환"""
        return asdict(self)
