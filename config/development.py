import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hours_db"),
}

# Where the dashboard reaches the JSON API (normally this same server)
# The dashboard requests this API while serving a page. When both run on the
# same server it needs threads or more than one worker process.
API_BASE_URL = os.getenv("API_BASE_URL", "http://127.0.0.1:5000")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "10"))

# "work_week" (Mon-Fri of the current week) or "trailing_7_days"
WEEK_WINDOW = os.getenv("WEEK_WINDOW", "work_week")
DEFAULT_HOURLY_RATE = float(os.getenv("DEFAULT_HOURLY_RATE", "0"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
