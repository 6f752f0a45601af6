from __future__ import annotations

from typing import Sequence

from mysql.connector import IntegrityError

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import HolidayRecord
from .repository import HolidayRepository

_COLUMNS = "holiday_date, name, hebrew_name, holiday_year, is_school_holiday"


def _to_record(r: dict) -> HolidayRecord:
    return HolidayRecord(
        date=str(r["holiday_date"]),
        name=r["name"],
        hebrew_name=r.get("hebrew_name"),
        year=int(r["holiday_year"]),
        is_school_holiday=bool(r["is_school_holiday"]),
    )


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_range(self, *, start: str, end: str) -> Sequence[HolidayRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM holidays
                WHERE holiday_date BETWEEN %s AND %s
                ORDER BY holiday_date ASC
                """,
                (start, end),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_year(self, year: int) -> Sequence[HolidayRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM holidays WHERE holiday_year=%s ORDER BY holiday_date ASC",
                (int(year),),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def count_for_year(self, year: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM holidays WHERE holiday_year=%s", (int(year),))
            r = fetchone(cur)
            return int(r["n"]) if r else 0

    def insert_if_absent(self, record: HolidayRecord) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"INSERT INTO holidays({_COLUMNS}) VALUES(%s,%s,%s,%s,%s)",
                    (record.date, record.name, record.hebrew_name, record.year, int(record.is_school_holiday)),
                )
                return True
        except IntegrityError as e:
            if is_duplicate_key(e):
                return False
            raise

    def upsert(self, record: HolidayRecord) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO holidays({_COLUMNS})
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    name=VALUES(name),
                    hebrew_name=VALUES(hebrew_name),
                    holiday_year=VALUES(holiday_year),
                    is_school_holiday=VALUES(is_school_holiday)
                """,
                (record.date, record.name, record.hebrew_name, record.year, int(record.is_school_holiday)),
            )
