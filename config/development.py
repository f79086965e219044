import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "worktime_db"),
}

# Fallback shift times used when a day has only an IN or only an OUT punch
DEFAULT_SHIFT_START = os.getenv("DEFAULT_SHIFT_START", "08:00")
DEFAULT_SHIFT_END = os.getenv("DEFAULT_SHIFT_END", "17:00")

MAX_DISPLAYED_WARNINGS = int(os.getenv("MAX_DISPLAYED_WARNINGS", "10"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
