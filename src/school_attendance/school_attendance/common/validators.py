from __future__ import annotations

from datetime import date
from typing import Any, Optional

from ..core.constants import MAX_YEAR, MIN_YEAR
from ..core.exceptions import ValidationError
from .datetime_utils import DateLike, as_date


def require_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} is not a valid number")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is not a valid number") from None


def require_year(value: Any) -> int:
    year = require_int(value, "year")
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValidationError(f"year must be between {MIN_YEAR} and {MAX_YEAR}")
    return year


def require_month(value: Any) -> int:
    month = require_int(value, "month")
    if month < 1 or month > 12:
        raise ValidationError("month must be between 1 and 12")
    return month


def require_date(value: DateLike, field_name: str = "date") -> date:
    if value is None or value == "":
        raise ValidationError(f"{field_name} is required")
    parsed = as_date(value)
    require_year(parsed.year)
    return parsed


def require_date_range(start: DateLike, end: DateLike) -> tuple[date, date]:
    start_d = require_date(start, "start")
    end_d = require_date(end, "end")
    if end_d < start_d:
        raise ValidationError("end must not be before start")
    return start_d, end_d


def optional_int(value: Any, field_name: str) -> Optional[int]:
    if value is None or value == "":
        return None
    return require_int(value, field_name)
