import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "worktime_test"),
}

DEFAULT_SHIFT_START = "08:00"
DEFAULT_SHIFT_END = "17:00"

MAX_DISPLAYED_WARNINGS = 10

DEBUG = False
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
