"""리포트 기간 계산

today / yesterday / week / sprint 명령어가 사용하는 날짜 범위를 만듭니다.
모든 함수는 테스트를 위해 기준일(today)을 받을 수 있습니다.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional


@dataclass(frozen=True)
class DateRange:
    """since ~ until (양 끝 포함) 날짜 범위"""
    since: date
    until: date

    def to_git_args(self) -> List[str]:
        """git log 에 전달할 --since / --until 인자"""
        return [
            f"--since={self.since.isoformat()} 00:00:00",
            f"--until={self.until.isoformat()} 23:59:59",
        ]

    def __str__(self) -> str:
        return f"{self.since.isoformat()} to {self.until.isoformat()}"


def _today(today: Optional[date]) -> date:
    return today or date.today()


def get_date_range(day: Optional[date] = None) -> DateRange:
    """하루 전체 범위 (기본값: 오늘)"""
    day = _today(day)
    return DateRange(since=day, until=day)


def get_yesterday_date_range(today: Optional[date] = None) -> DateRange:
    return get_date_range(_today(today) - timedelta(days=1))


def get_week_date_range(today: Optional[date] = None) -> DateRange:
    """이번 주 월요일 ~ 오늘

    오늘이 월요일이면 지난주 월요일 ~ 일요일 전체를 반환합니다.
    """
    today = _today(today)
    days_since_monday = today.weekday()

    if days_since_monday == 0:
        return DateRange(
            since=today - timedelta(days=7),
            until=today - timedelta(days=1),
        )

    return DateRange(since=today - timedelta(days=days_since_monday), until=today)


def get_sprint_date_range(sprint_length: int, today: Optional[date] = None) -> DateRange:
    """가장 최근 월요일에서 sprint_length 주 전 ~ 오늘"""
    today = _today(today)
    sprint_start = today - timedelta(days=today.weekday())
    sprint_start -= timedelta(weeks=sprint_length)
    return DateRange(since=sprint_start, until=today)
