from __future__ import annotations

from datetime import date, time
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, GeoPoint


class AttendanceRepository(Protocol):
    def get_recent_for_employee(self, employee_id: int, limit: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_between(self, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        """Records with start_date <= work_date <= end_date (inclusive)."""

        raise NotImplementedError

    def create_clock_in(
        self,
        *,
        employee_id: int,
        work_date: date,
        clock_in: time,
        status: AttendanceStatus,
        location: Optional[GeoPoint] = None,
    ) -> int:
        raise NotImplementedError

    def update_clock_out(self, *, attendance_id: int, clock_out: time, hours_worked: float) -> bool:
        raise NotImplementedError

    def upsert_status(self, *, employee_id: int, work_date: date, status: AttendanceStatus) -> None:
        """Admin-only override: create or update the (employee, date) record, keeping clock times."""

        raise NotImplementedError
