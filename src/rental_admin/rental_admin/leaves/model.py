from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import LeaveStatus, LeaveType


@dataclass(frozen=True)
class LeaveRecord:
    leave_id: int
    employee_id: int
    leave_type: LeaveType
    from_date: date
    to_date: date
    days: int
    reason: str
    status: LeaveStatus
    applied_at: datetime
    employee_name: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "leave_id": self.leave_id,
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "type": self.leave_type.value,
            "from_date": self.from_date.strftime("%Y-%m-%d"),
            "to_date": self.to_date.strftime("%Y-%m-%d"),
            "days": self.days,
            "reason": self.reason,
            "status": self.status.value,
            "applied_at": self.applied_at.isoformat(),
        }
