"""커밋 중요도 enum 모듈"""

from enum import Enum


class ImportanceLevel(Enum):
    """커밋 중요도 단계

    high > medium > low 순서의 전순서를 가집니다.
    """

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """정렬용 순위 (클수록 중요)"""
        return {
            ImportanceLevel.HIGH: 3,
            ImportanceLevel.MEDIUM: 2,
            ImportanceLevel.LOW: 1,
        }[self]

    @property
    def is_key(self) -> bool:
        """핵심 기여(high 또는 medium) 여부"""
        return self is not ImportanceLevel.LOW

    def __lt__(self, other: 'ImportanceLevel') -> bool:
        if not isinstance(other, ImportanceLevel):
            return NotImplemented
        return self.rank < other.rank

    def __str__(self) -> str:
        return self.value
