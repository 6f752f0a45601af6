from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..common.math_utils import percent


@dataclass(frozen=True)
class StatRow:
    """Per-student attendance tally over a period."""

    student_id: int
    student_name: str
    class_name: Optional[str]
    present_count: int
    absent_count: int
    late_count: int
    excused_count: int
    total_records: int

    @property
    def rate(self) -> int:
        return percent(self.present_count, self.total_records)

    def to_dict(self) -> dict:
        return {
            "student_id": self.student_id,
            "student_name": self.student_name,
            "class_name": self.class_name,
            "present_count": self.present_count,
            "absent_count": self.absent_count,
            "late_count": self.late_count,
            "excused_count": self.excused_count,
            "total_records": self.total_records,
            "rate": self.rate,
        }


@dataclass(frozen=True)
class StatsSummary:
    present: int
    absent: int
    late: int
    excused: int
    total: int

    @property
    def attendance_rate(self) -> int:
        return percent(self.present, self.total)

    def to_dict(self) -> dict:
        return {
            "present": self.present,
            "absent": self.absent,
            "late": self.late,
            "excused": self.excused,
            "total": self.total,
            "attendance_rate": self.attendance_rate,
        }


@dataclass(frozen=True)
class StatsReport:
    start: str
    end: str
    rows: List[StatRow]
    summary: StatsSummary
    top_performers: List[StatRow]
    attendance_issues: List[StatRow]

    def to_dict(self) -> dict:
        return {
            "start": self.start,
            "end": self.end,
            "rows": [r.to_dict() for r in self.rows],
            "summary": self.summary.to_dict(),
            "top_performers": [r.to_dict() for r in self.top_performers],
            "attendance_issues": [r.to_dict() for r in self.attendance_issues],
        }
