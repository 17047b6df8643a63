import os


class Config:
    """Settings shared by every environment, read from the process environment."""

    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "rental_admin")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    # Payroll: gross / working days is the per-day rate, a late day costs a fraction of it
    PAYROLL_WORKING_DAYS = int(os.environ.get("PAYROLL_WORKING_DAYS", "26"))
    PAYROLL_LATE_PENALTY = float(os.environ.get("PAYROLL_LATE_PENALTY", "0.10"))

    # Clock-ins after office start + grace are late
    ATTENDANCE_OFFICE_START = os.environ.get("ATTENDANCE_OFFICE_START", "09:00")
    ATTENDANCE_LATE_GRACE_MINUTES = int(os.environ.get("ATTENDANCE_LATE_GRACE_MINUTES", "15"))

    @classmethod
    def db_config(cls) -> dict:
        return {
            "host": cls.DB_HOST,
            "port": cls.DB_PORT,
            "user": cls.DB_USER,
            "password": cls.DB_PASSWORD,
            "database": cls.DB_NAME,
        }
