from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lng: float


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one calendar date.

    (employee_id, work_date) is unique.
    """

    employee_id: int
    work_date: date
    status: AttendanceStatus
    clock_in: Optional[time] = None
    clock_out: Optional[time] = None
    hours_worked: Optional[float] = None
    location: Optional[GeoPoint] = None
    attendance_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "attendance_id": self.attendance_id,
            "employee_id": self.employee_id,
            "date": self.work_date.strftime("%Y-%m-%d"),
            "clock_in": self.clock_in.strftime("%H:%M:%S") if self.clock_in else None,
            "clock_out": self.clock_out.strftime("%H:%M:%S") if self.clock_out else None,
            "status": self.status.value,
            "hours_worked": self.hours_worked,
            "location": {"lat": self.location.lat, "lng": self.location.lng} if self.location else None,
        }


@dataclass(frozen=True)
class RegisterRow:
    """Read-model: one line of the daily register (record may be synthetic)."""

    employee_id: int
    employee_name: str
    record: AttendanceRecord
    persisted: bool

    def to_dict(self) -> dict:
        d = self.record.to_dict()
        d["employee_name"] = self.employee_name
        d["persisted"] = self.persisted
        return d


@dataclass(frozen=True)
class DailyRegister:
    work_date: date
    rows: list[RegisterRow] = field(default_factory=list)
    total_staff: int = 0
    present: int = 0
    absent: int = 0
    late: int = 0

    def to_dict(self) -> dict:
        return {
            "date": self.work_date.strftime("%Y-%m-%d"),
            "rows": [r.to_dict() for r in self.rows],
            "counts": {
                "total_staff": self.total_staff,
                "present": self.present,
                "absent": self.absent,
                "late": self.late,
            },
        }
