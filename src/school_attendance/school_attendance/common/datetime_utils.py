from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from typing import Iterator, Union

from ..core.constants import MIDDAY_HOUR
from ..core.exceptions import ValidationError

DateLike = Union[date, str]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)") from None


def as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(value)


def format_iso(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def at_midday(value: DateLike) -> datetime:
    """Pin a calendar date to 12:00 local time.

    Weekday and day-of-month are always read from the pinned value so a date
    never shifts across a DST/UTC boundary.
    """
    return datetime.combine(as_date(value), time(hour=MIDDAY_HOUR))


def day_of_week(value: DateLike) -> int:
    """0=Sunday .. 6=Saturday."""
    return at_midday(value).isoweekday() % 7


def day_of_month(value: DateLike) -> int:
    return at_midday(value).day


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_bounds(year: int, month: int) -> tuple[date, date]:
    return date(year, month, 1), date(year, month, days_in_month(year, month))


def iter_dates(start: date, end: date) -> Iterator[date]:
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)

