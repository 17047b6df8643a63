import os

from .config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = Config.db_config()

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

PAYROLL_WORKING_DAYS = Config.PAYROLL_WORKING_DAYS
PAYROLL_LATE_PENALTY = Config.PAYROLL_LATE_PENALTY
ATTENDANCE_OFFICE_START = Config.ATTENDANCE_OFFICE_START
ATTENDANCE_LATE_GRACE_MINUTES = Config.ATTENDANCE_LATE_GRACE_MINUTES

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo employees and equipment on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
