from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceRow, Scope, Student


class AttendanceRepository(Protocol):
    def find_by_date_range(self, scope: Scope, start: date, end: date) -> Sequence[AttendanceRow]:
        """Rows of active students in scope with start <= date <= end."""

        raise NotImplementedError

    def count_enrolled(self, scope: Scope) -> int:
        """Active students in scope, whether or not they have any attendance."""

        raise NotImplementedError


class StudentRepository(Protocol):
    def list_active(self, scope: Scope) -> Sequence[Student]:
        """Active students in scope ordered by name."""

        raise NotImplementedError

    def get_many(self, student_ids: Sequence[int]) -> Sequence[Student]:
        raise NotImplementedError
