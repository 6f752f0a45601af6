from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import AttendanceRow, Scope, Student
from .repository import AttendanceRepository, StudentRepository


def _scope_clauses(scope: Scope, alias: str) -> tuple[list[str], list[object]]:
    clauses: list[str] = []
    params: list[object] = []
    if scope.teacher_id is not None:
        clauses.append(f"{alias}.teacher_id=%s")
        params.append(int(scope.teacher_id))
    if scope.class_id is not None:
        clauses.append(f"{alias}.class_id=%s")
        params.append(int(scope.class_id))
    return clauses, params


def _to_student(r: dict) -> Student:
    return Student(
        student_id=int(r["student_id"]),
        name=r["full_name"],
        class_id=int(r["class_id"]) if r.get("class_id") is not None else None,
        class_name=r.get("class_name"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_by_date_range(self, scope: Scope, start: date, end: date) -> Sequence[AttendanceRow]:
        clauses, params = _scope_clauses(scope, "s")
        clauses.insert(0, "ar.attendance_date BETWEEN %s AND %s")
        params[:0] = [start, end]
        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT ar.student_id, ar.attendance_date, ar.status, ar.class_id
                FROM attendance_records ar
                JOIN students s ON s.student_id = ar.student_id AND s.is_active=1
                WHERE {where}
                ORDER BY ar.attendance_date ASC, ar.student_id ASC
                """,
                tuple(params),
            )
            return [
                AttendanceRow(
                    student_id=int(r["student_id"]),
                    date=normalize_mysql_date(r["attendance_date"]),
                    status=AttendanceStatus(r["status"]),
                    class_id=int(r["class_id"]) if r.get("class_id") is not None else None,
                )
                for r in fetchall(cur)
            ]

    def count_enrolled(self, scope: Scope) -> int:
        clauses, params = _scope_clauses(scope, "s")
        clauses.insert(0, "s.is_active=1")
        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS n FROM students s WHERE {where}", tuple(params))
            r = fetchone(cur)
            return int(r["n"]) if r else 0


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active(self, scope: Scope) -> Sequence[Student]:
        clauses, params = _scope_clauses(scope, "s")
        clauses.insert(0, "s.is_active=1")
        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT s.student_id, s.full_name, s.class_id, c.class_name
                FROM students s
                LEFT JOIN classes c ON c.class_id = s.class_id
                WHERE {where}
                ORDER BY s.full_name ASC, s.student_id ASC
                """,
                tuple(params),
            )
            return [_to_student(r) for r in fetchall(cur)]

    def get_many(self, student_ids: Sequence[int]) -> Sequence[Student]:
        ids = [int(i) for i in student_ids]
        if not ids:
            return []

        placeholders = ",".join(["%s"] * len(ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT s.student_id, s.full_name, s.class_id, c.class_name
                FROM students s
                LEFT JOIN classes c ON c.class_id = s.class_id
                WHERE s.student_id IN ({placeholders})
                ORDER BY s.full_name ASC, s.student_id ASC
                """,
                tuple(ids),
            )
            return [_to_student(r) for r in fetchall(cur)]
