from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class Scope:
    """Ownership filter for attendance and enrolment queries."""

    teacher_id: Optional[int] = None
    class_id: Optional[int] = None


@dataclass(frozen=True)
class AttendanceRow:
    """One student's mark for one day."""

    student_id: int
    date: date
    status: AttendanceStatus
    class_id: Optional[int] = None


@dataclass(frozen=True)
class Student:
    student_id: int
    name: str
    class_id: Optional[int] = None
    class_name: Optional[str] = None
