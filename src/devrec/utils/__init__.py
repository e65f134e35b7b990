from .date_range import (
    DateRange,
    get_date_range,
    get_yesterday_date_range,
    get_week_date_range,
    get_sprint_date_range,
)

__all__ = [
    'DateRange',
    'get_date_range',
    'get_yesterday_date_range',
    'get_week_date_range',
    'get_sprint_date_range',
]
