from __future__ import annotations

from typing import Protocol, Sequence

from .model import HolidayRecord


class HolidayRepository(Protocol):
    def list_range(self, *, start: str, end: str) -> Sequence[HolidayRecord]:
        """Records with start <= date <= end (ISO strings), ordered by date."""

        raise NotImplementedError

    def list_year(self, year: int) -> Sequence[HolidayRecord]:
        raise NotImplementedError

    def count_for_year(self, year: int) -> int:
        raise NotImplementedError

    def insert_if_absent(self, record: HolidayRecord) -> bool:
        """Insert unless a record for record.date exists.

        Returns False when the date was already taken (including a concurrent
        writer winning the race).
        """

        raise NotImplementedError

    def upsert(self, record: HolidayRecord) -> None:
        raise NotImplementedError
