import os

from .config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = Config.db_config()

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

PAYROLL_WORKING_DAYS = Config.PAYROLL_WORKING_DAYS
PAYROLL_LATE_PENALTY = Config.PAYROLL_LATE_PENALTY
ATTENDANCE_OFFICE_START = Config.ATTENDANCE_OFFICE_START
ATTENDANCE_LATE_GRACE_MINUTES = Config.ATTENDANCE_LATE_GRACE_MINUTES

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
