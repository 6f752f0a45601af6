from __future__ import annotations

from collections import Counter
from typing import Dict, List, Sequence

from ..attendance.model import Scope, Student
from ..attendance.repository import AttendanceRepository, StudentRepository
from ..common.datetime_utils import DateLike, format_iso
from ..common.validators import require_date_range
from ..core.constants import DEFAULT_ISSUE_THRESHOLD, DEFAULT_TOP_PERFORMERS
from ..core.enums import AttendanceModel, AttendanceStatus
from .model import StatRow, StatsReport, StatsSummary


class StatisticsAggregator:
    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        *,
        model: AttendanceModel = AttendanceModel.FOUR_STATE,
    ):
        self._attendance = attendance
        self._students = students
        self._model = model

    def build_stats(self, start: DateLike, end: DateLike, scope: Scope | None = None) -> List[StatRow]:
        """One row per student, enrolled students first in name order.

        Enrolled students without attendance get a zero row; students that only
        appear in attendance rows are appended after them.
        """

        start_d, end_d = require_date_range(start, end)
        scope = scope or Scope()

        tallies: Dict[int, Counter] = {}
        for row in self._attendance.find_by_date_range(scope, start_d, end_d):
            tallies.setdefault(row.student_id, Counter())[self._model.normalize(row.status)] += 1

        students: List[Student] = list(self._students.list_active(scope))
        known = {s.student_id for s in students}
        missing = [sid for sid in tallies if sid not in known]
        if missing:
            found = {s.student_id: s for s in self._students.get_many(missing)}
            students.extend(found.get(sid) or Student(student_id=sid, name=str(sid)) for sid in missing)

        return [self._to_row(s, tallies.get(s.student_id, Counter())) for s in students]

    def build_report(
        self,
        start: DateLike,
        end: DateLike,
        scope: Scope | None = None,
        *,
        top: int = DEFAULT_TOP_PERFORMERS,
        threshold: int = DEFAULT_ISSUE_THRESHOLD,
    ) -> StatsReport:
        start_d, end_d = require_date_range(start, end)
        rows = self.build_stats(start_d, end_d, scope)
        return StatsReport(
            start=format_iso(start_d),
            end=format_iso(end_d),
            rows=rows,
            summary=summarize(rows),
            top_performers=top_performers(rows, limit=top),
            attendance_issues=attendance_issues(rows, threshold=threshold),
        )

    @staticmethod
    def _to_row(student: Student, tally: Counter) -> StatRow:
        return StatRow(
            student_id=student.student_id,
            student_name=student.name,
            class_name=student.class_name,
            present_count=tally[AttendanceStatus.PRESENT],
            absent_count=tally[AttendanceStatus.ABSENT],
            late_count=tally[AttendanceStatus.LATE],
            excused_count=tally[AttendanceStatus.EXCUSED],
            total_records=sum(tally.values()),
        )


def summarize(rows: Sequence[StatRow]) -> StatsSummary:
    return StatsSummary(
        present=sum(r.present_count for r in rows),
        absent=sum(r.absent_count for r in rows),
        late=sum(r.late_count for r in rows),
        excused=sum(r.excused_count for r in rows),
        total=sum(r.total_records for r in rows),
    )


def top_performers(rows: Sequence[StatRow], *, limit: int = DEFAULT_TOP_PERFORMERS) -> List[StatRow]:
    """Best rates first; students with no records are not ranked."""
    ranked = [r for r in rows if r.total_records > 0]
    # sorted() is stable: equal rates keep the incoming student order.
    return sorted(ranked, key=lambda r: r.rate, reverse=True)[: max(int(limit), 0)]


def attendance_issues(rows: Sequence[StatRow], *, threshold: int = DEFAULT_ISSUE_THRESHOLD) -> List[StatRow]:
    """Students below threshold; students with no records are not issues."""
    flagged = [r for r in rows if r.total_records > 0 and r.rate < threshold]
    return sorted(flagged, key=lambda r: r.rate)
