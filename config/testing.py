import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "rental_admin_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

PAYROLL_WORKING_DAYS = 26
PAYROLL_LATE_PENALTY = 0.10
ATTENDANCE_OFFICE_START = "09:00"
ATTENDANCE_LATE_GRACE_MINUTES = 15

AUTO_INIT_DB = False
AUTO_SEED_DB = False
