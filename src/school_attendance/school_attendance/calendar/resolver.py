from __future__ import annotations

from datetime import date
from typing import List, Optional

from ..common.datetime_utils import DateLike, day_of_week, format_iso, iter_dates
from ..common.validators import require_date, require_date_range
from ..core.constants import FRIDAY, SATURDAY, WEEKLY_REST_REASON
from ..holidays.model import HolidayRecord
from ..holidays.store import HolidayStore
from .model import SchoolDayClassification


def classify_day(day: date, holiday: Optional[HolidayRecord]) -> SchoolDayClassification:
    """Weekday rules combined with the holiday resolved for that date.

    Saturday is never a school day; a closing holiday takes the day off; any
    other holiday is attached for display only. Friday is a short day.
    """

    dow = day_of_week(day)
    if dow == SATURDAY:
        return SchoolDayClassification(
            date=day,
            day_of_week=dow,
            is_school_day=False,
            reason=WEEKLY_REST_REASON,
            holiday=holiday,
        )

    if holiday is not None and holiday.is_school_holiday:
        return SchoolDayClassification(
            date=day,
            day_of_week=dow,
            is_school_day=False,
            reason=holiday.hebrew_name or holiday.name,
            holiday=holiday,
        )

    return SchoolDayClassification(
        date=day,
        day_of_week=dow,
        is_school_day=True,
        is_half_day=dow == FRIDAY,
        holiday=holiday,
    )


class SchoolDayResolver:
    def __init__(self, holidays: HolidayStore):
        self._holidays = holidays

    def classify(self, value: DateLike) -> SchoolDayClassification:
        day = require_date(value)
        self._holidays.ensure_year(day.year)
        records = self._holidays.get_range(day, day)
        return classify_day(day, records[0] if records else None)

    def classify_range(self, start: DateLike, end: DateLike) -> List[SchoolDayClassification]:
        """Classify every date in [start, end].

        The holiday cache is filled once per year touched and read with a
        single range query.
        """

        start_d, end_d = require_date_range(start, end)
        for year in range(start_d.year, end_d.year + 1):
            self._holidays.ensure_year(year)

        by_date = {r.date: r for r in self._holidays.get_range(start_d, end_d)}
        return [classify_day(d, by_date.get(format_iso(d))) for d in iter_dates(start_d, end_d)]

    def non_school_days(self, start: DateLike, end: DateLike) -> List[SchoolDayClassification]:
        return [c for c in self.classify_range(start, end) if not c.is_school_day]
