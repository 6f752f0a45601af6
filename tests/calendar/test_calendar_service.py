from __future__ import annotations

from datetime import date

import pytest

from src.school_attendance.school_attendance.attendance.model import AttendanceRow, Scope
from src.school_attendance.school_attendance.calendar.resolver import SchoolDayResolver
from src.school_attendance.school_attendance.calendar.service import CalendarAggregator
from src.school_attendance.school_attendance.core.enums import AttendanceModel, AttendanceStatus
from src.school_attendance.school_attendance.core.exceptions import ValidationError
from src.school_attendance.school_attendance.holidays.model import HolidayRecord
from src.school_attendance.school_attendance.holidays.provider import HebrewCalendarProvider
from src.school_attendance.school_attendance.holidays.store import HolidayStore


class FakeHolidaysRepo:
    def __init__(self):
        self.rows: dict[str, HolidayRecord] = {}

    def list_range(self, *, start, end):
        return [self.rows[k] for k in sorted(self.rows) if start <= k <= end]

    def list_year(self, year):
        return [r for r in self.rows.values() if r.year == int(year)]

    def count_for_year(self, year):
        return len(self.list_year(year))

    def insert_if_absent(self, record):
        return self.rows.setdefault(record.date, record) is record

    def upsert(self, record):
        self.rows[record.date] = record


class FakeAttendanceRepo:
    def __init__(self, enrolled: int, rows=()):
        self.enrolled = enrolled
        self.rows = list(rows)
        self.range_queries = 0
        self.scopes: list[Scope] = []

    def find_by_date_range(self, scope, start, end):
        self.range_queries += 1
        self.scopes.append(scope)
        return [r for r in self.rows if start <= r.date <= end]

    def count_enrolled(self, scope):
        return self.enrolled


def _aggregator(attendance, model=AttendanceModel.FOUR_STATE):
    resolver = SchoolDayResolver(HolidayStore(FakeHolidaysRepo(), HebrewCalendarProvider()))
    return CalendarAggregator(resolver, attendance, model=model)


def test_month_without_attendance():
    attendance = FakeAttendanceRepo(enrolled=17)

    month = _aggregator(attendance).build_month(2026, 2, Scope(teacher_id=3))

    assert month.total_students == 17
    assert [d.day for d in month.days] == list(range(1, 29))
    for d in month.days:
        assert d.attendance.total == 17
        assert d.attendance.recorded == 0
        assert (d.attendance.present, d.attendance.absent, d.attendance.late, d.attendance.excused) == (0, 0, 0, 0)
    assert month.school_day_count == 24
    assert month.recorded_day_count == 0
    assert attendance.range_queries == 1
    assert attendance.scopes == [Scope(teacher_id=3)]


def test_month_counts_statuses_per_day():
    day = date(2026, 2, 3)
    attendance = FakeAttendanceRepo(
        enrolled=4,
        rows=[
            AttendanceRow(1, day, AttendanceStatus.PRESENT),
            AttendanceRow(2, day, AttendanceStatus.LATE),
            AttendanceRow(3, day, AttendanceStatus.ABSENT),
            AttendanceRow(1, date(2026, 2, 4), AttendanceStatus.EXCUSED),
            AttendanceRow(1, date(2026, 3, 1), AttendanceStatus.PRESENT),
        ],
    )

    month = _aggregator(attendance).build_month(2026, 2)

    tue = month.days[2].attendance
    assert (tue.present, tue.late, tue.absent, tue.excused) == (1, 1, 1, 0)
    assert tue.recorded == 3 and tue.total == 4
    assert month.days[3].attendance.excused == 1
    assert month.recorded_day_count == 2
    assert sum(d.attendance.recorded for d in month.days) == 4


def test_tu_bishvat_is_attached_to_an_open_day():
    month = _aggregator(FakeAttendanceRepo(enrolled=0)).build_month(2026, 2)

    feb2 = month.days[1]
    assert feb2.is_school_day is True
    assert feb2.classification.holiday.name == "Tu BiShvat"


def test_two_state_model_folds_statuses():
    day = date(2026, 2, 3)
    attendance = FakeAttendanceRepo(
        enrolled=2,
        rows=[AttendanceRow(1, day, AttendanceStatus.LATE), AttendanceRow(2, day, AttendanceStatus.EXCUSED)],
    )

    month = _aggregator(attendance, AttendanceModel.TWO_STATE).build_month(2026, 2)

    assert month.days[2].attendance.to_dict() == {"present": 1, "absent": 1, "total": 2, "recorded": 2}


def test_month_to_dict_shape():
    data = _aggregator(FakeAttendanceRepo(enrolled=17)).build_month(2026, 9).to_dict()

    assert data["year"] == 2026 and data["month"] == 9
    assert len(data["days"]) == 30
    first = data["days"][0]
    assert first["date"] == "2026-09-01"
    assert first["day"] == 1
    assert set(first["attendance"]) == {"present", "absent", "late", "excused", "total", "recorded"}
    rh = data["days"][11]
    assert rh["holiday"]["name"] == "Rosh Hashana I"
    assert rh["is_school_day"] is False


@pytest.mark.parametrize("year,month", [(2026, 0), (2026, 13), ("x", 1), (1800, 1)])
def test_invalid_month_is_rejected(year, month):
    with pytest.raises(ValidationError):
        _aggregator(FakeAttendanceRepo(enrolled=1)).build_month(year, month)
