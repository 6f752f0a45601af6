"""Recompute cached holidays for one or more Gregorian years.

Usage: python scripts/refresh_holidays.py 2026 2027
"""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.school_attendance.school_attendance.common.validators import require_year
from src.school_attendance.school_attendance.container import build_container
from src.school_attendance.school_attendance.main import holiday_config_from


def main(argv: list[str]) -> int:
    if not argv:
        print(__doc__.strip())
        return 2

    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))
    container = build_container(db_config=dict(settings.DB_CONFIG), holiday_config=holiday_config_from(settings))

    for raw in argv:
        year = require_year(raw)
        count = container.holiday_store.refresh_year(year)
        print(f"OK: {year} -> {count} holidays")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
