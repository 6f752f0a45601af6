import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "school_attendance"),
}

# "four_state" (present/absent/late/excused) or "two_state" (present/absent)
ATTENDANCE_MODEL = os.getenv("ATTENDANCE_MODEL", "four_state")

HOLIDAY_LOCATION = os.getenv("HOLIDAY_LOCATION", "Jerusalem")  # informational; dates do not depend on it
HOLIDAY_ISRAEL = bool(int(os.getenv("HOLIDAY_ISRAEL", "1")))
HOLIDAY_MINOR_FASTS = bool(int(os.getenv("HOLIDAY_MINOR_FASTS", "0")))
HOLIDAY_MODERN = bool(int(os.getenv("HOLIDAY_MODERN", "1")))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
