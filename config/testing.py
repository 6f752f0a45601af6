import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "school_attendance_test"),
}

ATTENDANCE_MODEL = "four_state"

HOLIDAY_LOCATION = "Jerusalem"  # informational; dates do not depend on it
HOLIDAY_ISRAEL = True
HOLIDAY_MINOR_FASTS = False
HOLIDAY_MODERN = True

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
