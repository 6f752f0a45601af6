from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Tuple

from ..common.datetime_utils import format_iso
from ..core.enums import AttendanceModel, AttendanceStatus
from ..holidays.model import HolidayRecord


@dataclass(frozen=True)
class SchoolDayClassification:
    """Whether school is in session on a date, and why not."""

    date: date
    day_of_week: int
    is_school_day: bool
    is_half_day: bool = False
    reason: Optional[str] = None
    holiday: Optional[HolidayRecord] = None

    def to_dict(self) -> dict:
        return {
            "date": format_iso(self.date),
            "day_of_week": self.day_of_week,
            "is_school_day": self.is_school_day,
            "is_half_day": self.is_half_day,
            "reason": self.reason,
            "holiday": self.holiday.to_dict() if self.holiday else None,
        }


@dataclass(frozen=True)
class AttendanceSummary:
    total: int
    recorded: int = 0
    present: int = 0
    absent: int = 0
    late: int = 0
    excused: int = 0
    statuses: Tuple[AttendanceStatus, ...] = field(default=AttendanceModel.FOUR_STATE.statuses, repr=False)

    def count(self, status: AttendanceStatus) -> int:
        return int(getattr(self, status.value))

    def to_dict(self) -> dict:
        out = {status.value: self.count(status) for status in self.statuses}
        out["total"] = self.total
        out["recorded"] = self.recorded
        return out


@dataclass(frozen=True)
class CalendarDay:
    day: int
    classification: SchoolDayClassification
    attendance: AttendanceSummary

    @property
    def date(self) -> date:
        return self.classification.date

    @property
    def is_school_day(self) -> bool:
        return self.classification.is_school_day

    def to_dict(self) -> dict:
        out = self.classification.to_dict()
        out["day"] = self.day
        out["attendance"] = self.attendance.to_dict()
        return out


@dataclass(frozen=True)
class CalendarMonth:
    year: int
    month: int
    total_students: int
    days: List[CalendarDay]

    @property
    def school_day_count(self) -> int:
        return sum(1 for d in self.days if d.is_school_day)

    @property
    def recorded_day_count(self) -> int:
        return sum(1 for d in self.days if d.is_school_day and d.attendance.recorded > 0)

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "month": self.month,
            "total_students": self.total_students,
            "school_days": self.school_day_count,
            "recorded_days": self.recorded_day_count,
            "days": [d.to_dict() for d in self.days],
        }
