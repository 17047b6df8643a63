from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import Month
from ..employees.model import Employee


@dataclass(frozen=True)
class AttendanceTally:
    present: int = 0
    absent: int = 0
    late: int = 0


@dataclass(frozen=True)
class PayAdjustment:
    per_day: float
    late_deduction: float
    absent_deduction: float
    deductions: int
    net_salary: float


@dataclass(frozen=True)
class PayrollRow:
    """Derived per request, never persisted."""

    employee: Employee
    present_days: int
    absent_days: int
    late_days: int
    leave_days: int
    gross_salary: float
    deductions: int
    net_salary: float

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee.employee_id,
            "name": self.employee.name,
            "role": self.employee.role.value,
            "department": self.employee.department,
            "present_days": self.present_days,
            "absent_days": self.absent_days,
            "late_days": self.late_days,
            "leave_days": self.leave_days,
            "gross_salary": self.gross_salary,
            "deductions": self.deductions,
            "net_salary": self.net_salary,
        }


@dataclass(frozen=True)
class PayrollSummary:
    total_payroll: float
    employee_count: int
    average_net_pay: int


@dataclass(frozen=True)
class PayrollReport:
    month: Month
    rows: tuple[PayrollRow, ...]
    summary: PayrollSummary
    run_seq: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "month": str(self.month),
            "rows": [r.to_dict() for r in self.rows],
            "summary": {
                "total_payroll": self.summary.total_payroll,
                "employee_count": self.summary.employee_count,
                "average_net_pay": self.summary.average_net_pay,
            },
        }
