from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository, MySQLStudentRepository
from .attendance.repository import AttendanceRepository, StudentRepository
from .calendar.resolver import SchoolDayResolver
from .calendar.service import CalendarAggregator
from .core.enums import AttendanceModel
from .database.connection import DBConfig, DatabaseConnection
from .holidays.classifier import HolidayClassifier
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .holidays.provider import HebrewCalendarProvider, HolidayCalendarConfig
from .holidays.repository import HolidayRepository
from .holidays.store import HolidayStore
from .stats.service import StatisticsAggregator


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    holidays_repo: HolidayRepository
    attendance_repo: AttendanceRepository
    students_repo: StudentRepository

    holiday_store: HolidayStore
    school_day_resolver: SchoolDayResolver
    calendar_aggregator: CalendarAggregator
    statistics_aggregator: StatisticsAggregator


def build_services(
    *,
    holidays_repo: HolidayRepository,
    attendance_repo: AttendanceRepository,
    students_repo: StudentRepository,
    holiday_config: HolidayCalendarConfig | None = None,
    attendance_model: AttendanceModel = AttendanceModel.FOUR_STATE,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    holiday_store = HolidayStore(
        holidays_repo,
        HebrewCalendarProvider(holiday_config),
        HolidayClassifier(),
    )
    resolver = SchoolDayResolver(holiday_store)

    return Container(
        conn=conn,
        holidays_repo=holidays_repo,
        attendance_repo=attendance_repo,
        students_repo=students_repo,
        holiday_store=holiday_store,
        school_day_resolver=resolver,
        calendar_aggregator=CalendarAggregator(resolver, attendance_repo, model=attendance_model),
        statistics_aggregator=StatisticsAggregator(attendance_repo, students_repo, model=attendance_model),
    )


def build_container(
    *,
    db_config: dict,
    holiday_config: HolidayCalendarConfig | None = None,
    attendance_model: AttendanceModel = AttendanceModel.FOUR_STATE,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    return build_services(
        holidays_repo=MySQLHolidayRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        students_repo=MySQLStudentRepository(conn),
        holiday_config=holiday_config,
        attendance_model=attendance_model,
        conn=conn,
    )
