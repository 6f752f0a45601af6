from __future__ import annotations

import logging
from typing import Dict, List

from ..common.datetime_utils import DateLike, as_date, format_iso, month_bounds
from ..common.validators import require_month, require_year
from ..core.exceptions import HolidayProviderError
from .classifier import HolidayClassifier
from .model import HolidayRecord
from .provider import HebrewCalendarProvider
from .repository import HolidayRepository

logger = logging.getLogger(__name__)


class HolidayStore:
    """Durable holiday cache, filled one Gregorian year at a time."""

    def __init__(
        self,
        holidays: HolidayRepository,
        provider: HebrewCalendarProvider,
        classifier: HolidayClassifier | None = None,
    ):
        self._holidays = holidays
        self._provider = provider
        self._classifier = classifier or HolidayClassifier()

    def get_range(self, start: DateLike, end: DateLike) -> List[HolidayRecord]:
        return list(self._holidays.list_range(start=format_iso(as_date(start)), end=format_iso(as_date(end))))

    def ensure_year(self, year: int) -> None:
        year = int(year)
        if self._holidays.count_for_year(year) > 0:
            return

        resolved = self.resolve_year(year)
        written = 0
        for record in resolved:
            if self._holidays.insert_if_absent(record):
                written += 1
        logger.info("Cached %d of %d holidays for %d", written, len(resolved), year)

    def refresh_year(self, year: int) -> int:
        """Recompute a year and overwrite cached rows with identical values."""
        resolved = self.resolve_year(int(year))
        for record in resolved:
            self._holidays.upsert(record)
        return len(resolved)

    def resolve_year(self, year: int) -> List[HolidayRecord]:
        """Classify the provider's events for a year, one record per date.

        When the calendar computation fails nothing is returned, so a later
        call can try again.
        """

        by_date: Dict[str, HolidayRecord] = {}
        try:
            for event in self._provider.list_events(year):
                classification = self._classifier.classify(event)
                if classification is None:
                    continue
                key = format_iso(event.date)
                if key in by_date:
                    continue
                by_date[key] = HolidayRecord(
                    date=key,
                    name=event.description,
                    hebrew_name=classification.hebrew_name,
                    year=event.date.year,
                    is_school_holiday=classification.is_school_holiday,
                )
        except HolidayProviderError:
            logger.warning("Holiday calendar unavailable for %s; continuing without holidays", year, exc_info=True)
            return []

        return [by_date[k] for k in sorted(by_date)]

    def holidays_for_year(self, year: int) -> List[HolidayRecord]:
        year = require_year(year)
        self.ensure_year(year)
        return list(self._holidays.list_year(year))

    def holidays_for_month(self, year: int, month: int) -> List[HolidayRecord]:
        year = require_year(year)
        month = require_month(month)
        self.ensure_year(year)
        start, end = month_bounds(year, month)
        return self.get_range(start, end)
