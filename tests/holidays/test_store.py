from __future__ import annotations

import logging
from datetime import date

from src.school_attendance.school_attendance.calendar.resolver import SchoolDayResolver
from src.school_attendance.school_attendance.core.exceptions import HolidayProviderError
from src.school_attendance.school_attendance.holidays import provider as provider_module
from src.school_attendance.school_attendance.holidays.model import HolidayRecord, RawEvent
from src.school_attendance.school_attendance.holidays.provider import HebrewCalendarProvider
from src.school_attendance.school_attendance.holidays.store import HolidayStore


class FakeHolidaysRepo:
    def __init__(self):
        self.rows: dict[str, HolidayRecord] = {}
        self.insert_calls = 0

    def list_range(self, *, start, end):
        return [self.rows[k] for k in sorted(self.rows) if start <= k <= end]

    def list_year(self, year):
        return [self.rows[k] for k in sorted(self.rows) if self.rows[k].year == int(year)]

    def count_for_year(self, year):
        return len(self.list_year(year))

    def insert_if_absent(self, record):
        self.insert_calls += 1
        if record.date in self.rows:
            return False
        self.rows[record.date] = record
        return True

    def upsert(self, record):
        self.rows[record.date] = record


class FakeProvider:
    def __init__(self, events):
        self.events = list(events)
        self.calls = 0

    def list_events(self, year):
        self.calls += 1
        for ev in self.events:
            if ev.date.year == year:
                yield ev


class FailingProvider:
    def list_events(self, year):
        raise HolidayProviderError("calendar offline")


def test_ensure_year_writes_once_and_is_idempotent():
    repo = FakeHolidaysRepo()
    provider = FakeProvider(
        [
            RawEvent("Yom Kippur", date(2026, 9, 21)),
            RawEvent("Chanukah: 3 Candles", date(2026, 12, 6)),
            RawEvent("Parashat Noach", date(2026, 10, 17)),
        ]
    )
    store = HolidayStore(repo, provider)

    store.ensure_year(2026)
    store.ensure_year(2026)

    assert provider.calls == 1
    assert sorted(repo.rows) == ["2026-09-21", "2026-12-06"]
    assert repo.rows["2026-09-21"].is_school_holiday is True
    assert repo.rows["2026-12-06"].is_school_holiday is False
    assert repo.rows["2026-09-21"].hebrew_name == "יום כיפור"


def test_first_classified_event_wins_within_a_date():
    repo = FakeHolidaysRepo()
    provider = FakeProvider(
        [
            RawEvent("Erev Shavuot", date(2026, 5, 21)),
            RawEvent("Yom Kippur", date(2026, 5, 21)),
            RawEvent("Lag BaOmer", date(2026, 5, 21)),
        ]
    )
    store = HolidayStore(repo, provider)

    store.ensure_year(2026)

    record = repo.rows["2026-05-21"]
    assert record.name == "Yom Kippur"
    assert repo.insert_calls == 1


def test_existing_rows_are_not_overwritten_on_conflict():
    repo = FakeHolidaysRepo()
    # Written by a concurrent request for a different year key.
    repo.rows["2026-09-21"] = HolidayRecord("2026-09-21", "Yom Kippur", "יום כיפור", 2025, True)
    store = HolidayStore(repo, FakeProvider([RawEvent("Purim", date(2026, 9, 21))]))

    store.ensure_year(2026)

    assert repo.rows["2026-09-21"].name == "Yom Kippur"


def test_provider_failure_is_logged_and_retried_later(caplog):
    repo = FakeHolidaysRepo()
    store = HolidayStore(repo, FailingProvider())

    with caplog.at_level(logging.WARNING):
        store.ensure_year(2026)

    assert repo.rows == {}
    assert "calendar unavailable" in caplog.text

    HolidayStore(repo, FakeProvider([RawEvent("Yom Kippur", date(2026, 9, 21))])).ensure_year(2026)
    assert list(repo.rows) == ["2026-09-21"]


def test_get_range_is_inclusive_and_ordered():
    repo = FakeHolidaysRepo()
    store = HolidayStore(repo, HebrewCalendarProvider())
    store.ensure_year(2026)

    records = store.get_range("2026-09-12", "2026-09-21")

    assert [r.date for r in records] == ["2026-09-12", "2026-09-13", "2026-09-20", "2026-09-21"]


def test_holidays_for_month_fills_cache():
    repo = FakeHolidaysRepo()
    store = HolidayStore(repo, HebrewCalendarProvider())

    records = store.holidays_for_month(2026, 4)

    names = [r.name for r in records]
    assert names[:2] == ["Erev Pesach", "Pesach I"]
    assert "Yom HaAtzma'ut" in names
    assert repo.count_for_year(2026) > len(records)


def test_refresh_year_is_idempotent():
    repo = FakeHolidaysRepo()
    store = HolidayStore(repo, HebrewCalendarProvider())
    store.ensure_year(2026)
    before = dict(repo.rows)

    count = store.refresh_year(2026)

    assert count == len(before)
    assert repo.rows == before


def test_calendar_library_failure_does_not_fail_classification(monkeypatch, caplog):
    def broken_hebrew_date(*args, **kwargs):
        raise IndexError("month table out of range")

    monkeypatch.setattr(provider_module.dates, "HebrewDate", broken_hebrew_date)
    repo = FakeHolidaysRepo()
    resolver = SchoolDayResolver(HolidayStore(repo, HebrewCalendarProvider()))

    with caplog.at_level(logging.WARNING):
        result = resolver.classify("2026-01-05")

    assert result.is_school_day is True
    assert result.holiday is None
    assert repo.rows == {}
    assert "calendar unavailable" in caplog.text
