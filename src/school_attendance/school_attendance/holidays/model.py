from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class RawEvent:
    """Calendar event as produced by the Hebrew calendar provider."""

    description: str
    date: date


@dataclass(frozen=True)
class HolidayRecord:
    """Resolved holiday, one per calendar date.

    `date` is kept as a YYYY-MM-DD string so no timezone can shift it.
    """

    date: str
    name: str
    hebrew_name: Optional[str]
    year: int
    is_school_holiday: bool

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "name": self.name,
            "hebrew_name": self.hebrew_name,
            "year": self.year,
            "is_school_holiday": self.is_school_holiday,
        }

    def to_brief(self) -> dict:
        return {"date": self.date, "name": self.name, "hebrew_name": self.hebrew_name}
