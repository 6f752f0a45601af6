from __future__ import annotations

from datetime import date

import pytest

from src.school_attendance.school_attendance.attendance.model import AttendanceRow, Student
from src.school_attendance.school_attendance.container import build_services
from src.school_attendance.school_attendance.core.enums import AttendanceStatus
from src.school_attendance.school_attendance.main import create_app


class FakeHolidaysRepo:
    def __init__(self):
        self.rows = {}

    def list_range(self, *, start, end):
        return [self.rows[k] for k in sorted(self.rows) if start <= k <= end]

    def list_year(self, year):
        return [self.rows[k] for k in sorted(self.rows) if self.rows[k].year == int(year)]

    def count_for_year(self, year):
        return len(self.list_year(year))

    def insert_if_absent(self, record):
        return self.rows.setdefault(record.date, record) is record

    def upsert(self, record):
        self.rows[record.date] = record


class FakeAttendanceRepo:
    def __init__(self, rows):
        self.rows = list(rows)

    def find_by_date_range(self, scope, start, end):
        rows = [r for r in self.rows if start <= r.date <= end]
        if scope.class_id is not None:
            rows = [r for r in rows if r.class_id == scope.class_id]
        return rows

    def count_enrolled(self, scope):
        return 2 if scope.class_id in (None, 1) else 0


class FakeStudentsRepo:
    def list_active(self, scope):
        if scope.class_id not in (None, 1):
            return []
        return [Student(1, "Avi", 1, "3A"), Student(2, "Dana", 1, "3A")]

    def get_many(self, student_ids):
        return []


@pytest.fixture()
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    rows = [
        AttendanceRow(1, date(2026, 2, 3), AttendanceStatus.PRESENT, 1),
        AttendanceRow(2, date(2026, 2, 3), AttendanceStatus.ABSENT, 1),
        AttendanceRow(1, date(2026, 2, 4), AttendanceStatus.PRESENT, 1),
    ]
    container = build_services(
        holidays_repo=FakeHolidaysRepo(),
        attendance_repo=FakeAttendanceRepo(rows),
        students_repo=FakeStudentsRepo(),
    )
    app = create_app(container)
    app.config["TESTING"] = True
    return app.test_client()


def test_calendar_month(client):
    resp = client.get("/api/calendar/2026/2?class_id=1")

    assert resp.status_code == 200
    data = resp.get_json()
    assert data["total_students"] == 2
    assert data["recorded_days"] == 2
    assert data["days"][2]["attendance"] == {
        "present": 1,
        "absent": 1,
        "late": 0,
        "excused": 0,
        "total": 2,
        "recorded": 2,
    }


def test_calendar_rejects_bad_month(client):
    resp = client.get("/api/calendar/2026/13")

    assert resp.status_code == 400
    assert "month" in resp.get_json()["error"]


def test_calendar_rejects_bad_scope(client):
    resp = client.get("/api/calendar/2026/2?class_id=abc")

    assert resp.status_code == 400


def test_holidays_for_month(client):
    resp = client.get("/api/holidays/2026/9")

    assert resp.status_code == 200
    data = resp.get_json()
    assert data[0]["name"] == "Erev Rosh Hashana"
    assert {"date": "2026-09-12", "name": "Rosh Hashana I", "hebrew_name": "ראש השנה א׳"} in data
    assert all(set(h) == {"date", "name", "hebrew_name"} for h in data)


def test_holidays_for_year(client):
    data = client.get("/api/holidays/2026").get_json()

    assert any(h["name"] == "Yom Kippur" and h["is_school_holiday"] for h in data)
    assert [h["date"] for h in data] == sorted(h["date"] for h in data)


def test_check_date(client):
    data = client.get("/api/holidays/check/2026-12-04").get_json()

    assert data["is_school_day"] is True
    assert data["is_half_day"] is True
    assert data["day_of_week"] == 5
    assert data["holiday"]["name"] == "Chanukah: 1 Candle"


def test_check_date_rejects_garbage(client):
    assert client.get("/api/holidays/check/2026-02-30").status_code == 400


def test_non_school_days(client):
    resp = client.get("/api/holidays/non-school-days?start=2026-01-01&end=2026-01-10")

    assert resp.status_code == 200
    assert [d["date"] for d in resp.get_json()] == ["2026-01-03", "2026-01-10"]


def test_non_school_days_requires_range(client):
    assert client.get("/api/holidays/non-school-days?start=2026-01-01").status_code == 400


def test_stats_report(client):
    resp = client.get("/api/attendance/stats?start=2026-02-01&end=2026-02-28&class_id=1&top=1")

    assert resp.status_code == 200
    data = resp.get_json()
    assert [r["student_name"] for r in data["rows"]] == ["Avi", "Dana"]
    assert data["rows"][0]["rate"] == 100
    assert data["rows"][1]["rate"] == 0
    assert [r["student_name"] for r in data["top_performers"]] == ["Avi"]
    assert [r["student_name"] for r in data["attendance_issues"]] == ["Dana"]
    assert data["summary"]["attendance_rate"] == 67


def test_stats_requires_range(client):
    assert client.get("/api/attendance/stats?start=2026-02-01").status_code == 400
