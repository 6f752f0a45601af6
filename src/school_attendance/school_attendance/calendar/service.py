from __future__ import annotations

from collections import Counter, defaultdict
from typing import Dict, List, Sequence

from ..attendance.model import AttendanceRow, Scope
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import day_of_month, format_iso, month_bounds
from ..common.validators import require_month, require_year
from ..core.enums import AttendanceModel, AttendanceStatus
from .model import AttendanceSummary, CalendarDay, CalendarMonth
from .resolver import SchoolDayResolver


class CalendarAggregator:
    """Month view: school-day classification merged with attendance counts."""

    def __init__(
        self,
        resolver: SchoolDayResolver,
        attendance: AttendanceRepository,
        *,
        model: AttendanceModel = AttendanceModel.FOUR_STATE,
    ):
        self._resolver = resolver
        self._attendance = attendance
        self._model = model

    def build_month(self, year: int, month: int, scope: Scope | None = None) -> CalendarMonth:
        year = require_year(year)
        month = require_month(month)
        scope = scope or Scope()

        start, end = month_bounds(year, month)
        classifications = self._resolver.classify_range(start, end)
        total = self._attendance.count_enrolled(scope)

        rows_by_date: Dict[str, List[AttendanceRow]] = defaultdict(list)
        for row in self._attendance.find_by_date_range(scope, start, end):
            rows_by_date[format_iso(row.date)].append(row)

        days = [
            CalendarDay(
                day=day_of_month(c.date),
                classification=c,
                attendance=self.summarize(rows_by_date.get(format_iso(c.date), []), total),
            )
            for c in classifications
        ]
        return CalendarMonth(year=year, month=month, total_students=total, days=days)

    def summarize(self, rows: Sequence[AttendanceRow], total: int) -> AttendanceSummary:
        counts = Counter(self._model.normalize(r.status) for r in rows)
        return AttendanceSummary(
            total=total,
            recorded=len({r.student_id for r in rows}),
            present=counts[AttendanceStatus.PRESENT],
            absent=counts[AttendanceStatus.ABSENT],
            late=counts[AttendanceStatus.LATE],
            excused=counts[AttendanceStatus.EXCUSED],
            statuses=self._model.statuses,
        )
