from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from mysql.connector import errorcode

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def is_duplicate_key(exc: Exception) -> bool:
    return getattr(exc, "errno", None) == errorcode.ER_DUP_ENTRY


def normalize_mysql_date(value: Any) -> date:
    """Normalize DATE/CHAR(10) columns to datetime.date.

    mysql-connector returns DATE as datetime.date, CHAR columns as str.
    """

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if isinstance(value, str):
        return date.fromisoformat(value.strip()[:10])
    raise TypeError(f"Unsupported MySQL DATE value type: {type(value)!r}")
