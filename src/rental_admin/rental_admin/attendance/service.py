from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Optional

from ..common.rounding import round_half_up
from ..common.validators import require_choice
from ..core.constants import DEFAULT_HISTORY_LIMIT, DEFAULT_LATE_GRACE_MINUTES, DEFAULT_OFFICE_START
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord, DailyRegister, GeoPoint, RegisterRow
from .repository import AttendanceRepository

log = logging.getLogger(__name__)


def hours_between(clock_in: time, clock_out: time) -> float:
    """Worked hours from HH:MM of both stamps, one decimal, never negative."""

    minutes = (clock_out.hour * 60 + clock_out.minute) - (clock_in.hour * 60 + clock_in.minute)
    return max(round_half_up(minutes / 60, 1), 0.0)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
        office_start: time = DEFAULT_OFFICE_START,
        grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES,
    ):
        self._attendance = attendance
        self._employees = employees
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._office_start = office_start
        self._grace_minutes = int(grace_minutes)

    def _require_active(self, employee_id: int):
        emp = self._employees.get_by_id(int(employee_id))
        if not emp:
            raise NotFoundError("Employee not found")
        if not emp.is_active:
            raise ValidationError("Employee is inactive")
        return emp

    def clock_in(
        self,
        employee_id: int,
        *,
        now: datetime | None = None,
        location: Optional[GeoPoint] = None,
    ) -> AttendanceRecord:
        now = now or datetime.now()
        today = now.date()

        self._require_active(employee_id)

        existing = self._attendance.get_for_employee_and_date(int(employee_id), today)
        if existing and existing.clock_in:
            raise ValidationError("Already clocked in today")
        if existing:
            # Marked by an admin before the employee arrived; one record per day.
            raise ValidationError(f"Attendance for today was already marked as {existing.status.value}")

        strategy = self._factory.for_clock_in(now=now, office_start=self._office_start, grace_minutes=self._grace_minutes)
        decision = strategy.decide_clock_in(now=now, office_start=self._office_start, grace_minutes=self._grace_minutes)

        clock_in = now.time().replace(microsecond=0)
        attendance_id = self._attendance.create_clock_in(
            employee_id=int(employee_id),
            work_date=today,
            clock_in=clock_in,
            status=decision.status,
            location=location,
        )
        log.info("employee %s clocked in at %s (%s)", employee_id, clock_in, decision.status.value)
        return AttendanceRecord(
            attendance_id=attendance_id,
            employee_id=int(employee_id),
            work_date=today,
            clock_in=clock_in,
            status=decision.status,
            location=location,
        )

    def clock_out(self, employee_id: int, *, now: datetime | None = None) -> AttendanceRecord:
        now = now or datetime.now()
        today = now.date()

        record = self._attendance.get_for_employee_and_date(int(employee_id), today)
        if not record or not record.clock_in:
            raise ValidationError("You have not clocked in today")
        if record.clock_out is not None:
            raise ValidationError("Already clocked out today")

        clock_out = now.time().replace(microsecond=0)
        hours = hours_between(record.clock_in, clock_out)

        if not self._attendance.update_clock_out(
            attendance_id=record.attendance_id, clock_out=clock_out, hours_worked=hours
        ):
            raise ValidationError("Clock-out could not be saved")

        log.info("employee %s clocked out at %s (%.1f h)", employee_id, clock_out, hours)
        return AttendanceRecord(
            attendance_id=record.attendance_id,
            employee_id=record.employee_id,
            work_date=record.work_date,
            clock_in=record.clock_in,
            clock_out=clock_out,
            status=record.status,
            hours_worked=hours,
            location=record.location,
        )

    def mark_status(self, employee_id: int, work_date: date, status: str) -> AttendanceRecord:
        """Admin override for one employee-day."""

        status_v = require_choice(status, AttendanceStatus, "Status")
        if not self._employees.get_by_id(int(employee_id)):
            raise NotFoundError("Employee not found")

        self._attendance.upsert_status(employee_id=int(employee_id), work_date=work_date, status=status_v)
        log.info("attendance for employee %s on %s marked %s", employee_id, work_date, status_v.value)

        record = self._attendance.get_for_employee_and_date(int(employee_id), work_date)
        return record or AttendanceRecord(employee_id=int(employee_id), work_date=work_date, status=status_v)

    def daily_register(self, work_date: date, *, search: str = "") -> DailyRegister:
        employees = self._employees.list_active()
        by_employee = {r.employee_id: r for r in self._attendance.list_for_date(work_date)}

        rows: list[RegisterRow] = []
        for emp in employees:
            rec = by_employee.get(emp.employee_id)
            rows.append(
                RegisterRow(
                    employee_id=emp.employee_id,
                    employee_name=emp.name,
                    record=rec or AttendanceRecord(employee_id=emp.employee_id, work_date=work_date, status=AttendanceStatus.ABSENT),
                    persisted=rec is not None,
                )
            )

        statuses = [r.record.status for r in rows]
        term = (search or "").strip().lower()
        return DailyRegister(
            work_date=work_date,
            rows=[r for r in rows if term in r.employee_name.lower()] if term else rows,
            total_staff=len(employees),
            present=sum(1 for s in statuses if s in (AttendanceStatus.PRESENT, AttendanceStatus.LATE)),
            absent=sum(1 for s in statuses if s == AttendanceStatus.ABSENT),
            late=sum(1 for s in statuses if s == AttendanceStatus.LATE),
        )

    def history(self, employee_id: int, *, limit: int = DEFAULT_HISTORY_LIMIT) -> list[AttendanceRecord]:
        return list(self._attendance.get_recent_for_employee(int(employee_id), int(limit)))
