"""Example: using the service layer directly (no Flask).

Controllers are a thin layer; the calendar rules live in the services.
"""

import importlib

from config import get_settings_module

from src.school_attendance.school_attendance.attendance.model import Scope
from src.school_attendance.school_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    print(container.school_day_resolver.classify("2026-09-21").to_dict())

    month = container.calendar_aggregator.build_month(2026, 9, Scope(class_id=1))
    print(f"{month.school_day_count} school days, {month.recorded_day_count} with attendance")


if __name__ == "__main__":
    main()
