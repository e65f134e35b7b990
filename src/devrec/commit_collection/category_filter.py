"""카테고리 필터 해석 모듈

사용자가 입력한 부분 문자열/대소문자가 다른 카테고리 이름을
정확한 카테고리 이름으로 변환합니다.
"""

from typing import List, Optional

from .category_patterns import CATEGORY_NAMES


class CategoryFilterError(ValueError):
    """카테고리 필터 해석 실패"""

    def __init__(self, message: str, filter_value: str):
        super().__init__(message)
        self.filter = filter_value


class UnknownCategoryFilterError(CategoryFilterError):
    """어떤 카테고리와도 일치하지 않는 필터"""

    def __init__(self, filter_value: str, available: List[str]):
        super().__init__(
            f'Unknown category filter "{filter_value}". '
            f'Available categories: {", ".join(available)}',
            filter_value,
        )
        self.available = list(available)


class AmbiguousCategoryFilterError(CategoryFilterError):
    """여러 카테고리와 접두어가 일치하는 필터"""

    def __init__(self, filter_value: str, matches: List[str]):
        super().__init__(
            f'Ambiguous category filter "{filter_value}" matches: '
            f'{", ".join(matches)}. Please be more specific.',
            filter_value,
        )
        self.matches = list(matches)


def resolve_category_filter(filter_value: str,
                            available_categories: Optional[List[str]] = None) -> str:
    """필터 문자열을 정확한 카테고리 이름으로 해석

    우선순위: 정확히 일치 -> 대소문자 무시 일치 -> 대소문자 무시 접두어 일치

    Args:
        filter_value: 사용자 입력 (예: "feat", "Feature", "f")
        available_categories: 후보 카테고리 (기본값: 내장 카테고리 목록)

    Returns:
        정확한 카테고리 이름

    Raises:
        UnknownCategoryFilterError: 일치하는 카테고리가 없는 경우
        AmbiguousCategoryFilterError: 접두어가 여러 카테고리와 일치하는 경우
    """
    categories = list(CATEGORY_NAMES if available_categories is None else available_categories)

    if filter_value in categories:
        return filter_value

    lower_filter = filter_value.lower()
    for category in categories:
        if category.lower() == lower_filter:
            return category

    prefix_matches = [c for c in categories if c.lower().startswith(lower_filter)]

    if not prefix_matches:
        raise UnknownCategoryFilterError(filter_value, categories)

    if len(prefix_matches) > 1:
        raise AmbiguousCategoryFilterError(filter_value, prefix_matches)

    return prefix_matches[0]
