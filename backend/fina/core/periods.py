"""Periods — default date-range resolution for period queries.

Invariants:
    - Missing start defaults to the first day of the current month
    - Missing end defaults to the last day of the current month
    - Explicit bounds are never altered
    - Any failure computing a default surfaces as PeriodResolutionError
"""

import calendar
from datetime import date

from fina.core.errors import PeriodResolutionError


def first_day_of_month(day: date) -> date:
    return day.replace(day=1)


def last_day_of_month(day: date) -> date:
    _, days_in_month = calendar.monthrange(day.year, day.month)
    return day.replace(day=days_in_month)


def resolve_period(
    start_date: date | None, end_date: date | None, today: date,
) -> tuple[date, date]:
    """Fill missing bounds from the month containing ``today``."""
    try:
        start = start_date if start_date is not None else first_day_of_month(today)
        end = end_date if end_date is not None else last_day_of_month(today)
    except (AttributeError, TypeError, ValueError, OverflowError) as e:
        raise PeriodResolutionError(str(e)) from e
    return start, end
