from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .calendar.controller import register as register_calendar
from .container import Container, build_container
from .core.enums import AttendanceModel
from .database.bootstrap import apply_schema, list_tables
from .holidays.controller import register as register_holidays
from .holidays.provider import HolidayCalendarConfig
from .stats.controller import register as register_stats

logger = logging.getLogger(__name__)


def holiday_config_from(settings) -> HolidayCalendarConfig:
    return HolidayCalendarConfig(
        location=str(getattr(settings, "HOLIDAY_LOCATION", "Jerusalem")),
        israel=bool(getattr(settings, "HOLIDAY_ISRAEL", True)),
        include_minor_fasts=bool(getattr(settings, "HOLIDAY_MINOR_FASTS", False)),
        include_modern=bool(getattr(settings, "HOLIDAY_MODERN", True)),
    )


def create_app(container: Container | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.json.ensure_ascii = False

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(
            db_config=db_config,
            holiday_config=holiday_config_from(settings),
            attendance_model=AttendanceModel(getattr(settings, "ATTENDANCE_MODEL", AttendanceModel.FOUR_STATE.value)),
        )

    register_holidays(app, container)
    register_calendar(app, container)
    register_stats(app, container)

    return app
