from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import EmployeeStatus, Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee profile.

    Note: plain data object (no DB access code). Employees are never deleted,
    only moved to ``inactive``.
    """

    employee_id: int
    name: str
    email: str
    role: Role
    department: Optional[str]
    phone: Optional[str]
    salary: Optional[float]
    join_date: Optional[date]
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    created_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE

    def to_dict(self) -> dict:
        d = asdict(self)
        d["role"] = self.role.value
        d["status"] = self.status.value
        d["join_date"] = self.join_date.strftime("%Y-%m-%d") if self.join_date else None
        d["created_at"] = self.created_at.isoformat() if self.created_at else None
        return d
