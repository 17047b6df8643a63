from __future__ import annotations

from datetime import date, time
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time, optional_float
from .model import AttendanceRecord, GeoPoint
from .repository import AttendanceRepository

_COLUMNS = "attendance_id, employee_id, work_date, clock_in, clock_out, status, hours_worked, latitude, longitude"


def _row_to_record(r: dict) -> AttendanceRecord:
    lat = optional_float(r.get("latitude"))
    lng = optional_float(r.get("longitude"))
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        clock_in=normalize_mysql_time(r.get("clock_in")),
        clock_out=normalize_mysql_time(r.get("clock_out")),
        status=AttendanceStatus(r["status"]),
        hours_worked=optional_float(r.get("hours_worked")),
        location=GeoPoint(lat=lat, lng=lng) if lat is not None and lng is not None else None,
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_recent_for_employee(self, employee_id: int, limit: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE employee_id=%s
                ORDER BY work_date DESC
                LIMIT %s
                """,
                (int(employee_id), int(limit)),
            )
            return [_row_to_record(r) for r in fetchall(cur)]

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_records WHERE employee_id=%s AND work_date=%s",
                (int(employee_id), work_date),
            )
            r = fetchone(cur)
            return _row_to_record(r) if r else None

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_records WHERE work_date=%s", (work_date,))
            return [_row_to_record(r) for r in fetchall(cur)]

    def list_between(self, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE work_date BETWEEN %s AND %s
                ORDER BY work_date ASC, employee_id ASC
                """,
                (start_date, end_date),
            )
            return [_row_to_record(r) for r in fetchall(cur)]

    def create_clock_in(
        self,
        *,
        employee_id: int,
        work_date: date,
        clock_in: time,
        status: AttendanceStatus,
        location: Optional[GeoPoint] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(employee_id, work_date, clock_in, status, latitude, longitude)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(employee_id),
                    work_date,
                    clock_in,
                    status.value,
                    location.lat if location else None,
                    location.lng if location else None,
                ),
            )
            return int(cur.lastrowid)

    def update_clock_out(self, *, attendance_id: int, clock_out: time, hours_worked: float) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET clock_out=%s, hours_worked=%s
                WHERE attendance_id=%s
                """,
                (clock_out, hours_worked, int(attendance_id)),
            )
            return cur.rowcount > 0

    def upsert_status(self, *, employee_id: int, work_date: date, status: AttendanceStatus) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(employee_id, work_date, status)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status)
                """,
                (int(employee_id), work_date, status.value),
            )
