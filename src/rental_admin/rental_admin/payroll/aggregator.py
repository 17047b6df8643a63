"""Monthly payroll aggregation.

Joins the active roster with one month of attendance and approved leave and
produces one :class:`PayrollRow` per employee. Pure: no I/O, inputs are not
mutated, and the same snapshots always give the same rows.

Tally rules per attendance status:

* ``present``  -> present
* ``absent``   -> absent
* ``late``     -> present and late (a worked day with a penalty)
* ``half-day`` -> nothing; half days are not paid or docked yet
"""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import Month
from ..common.rounding import to_whole_amount
from ..core.enums import AttendanceStatus, LeaveStatus
from ..employees.model import Employee
from ..leaves.model import LeaveRecord
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import AttendanceTally, PayrollRow, PayrollSummary


def tally_attendance(records: Iterable[AttendanceRecord], month: Optional[Month] = None) -> dict[int, AttendanceTally]:
    counts: dict[int, list[int]] = defaultdict(lambda: [0, 0, 0])

    for r in records:
        if month is not None and not month.contains(r.work_date):
            continue
        c = counts[r.employee_id]
        if r.status == AttendanceStatus.PRESENT:
            c[0] += 1
        elif r.status == AttendanceStatus.ABSENT:
            c[1] += 1
        elif r.status == AttendanceStatus.LATE:
            c[0] += 1
            c[2] += 1

    return {emp_id: AttendanceTally(present=c[0], absent=c[1], late=c[2]) for emp_id, c in counts.items()}


def leave_days_by_employee(leaves: Iterable[LeaveRecord], month: Month) -> dict[int, int]:
    """Approved leave days per employee, attributed to the month the leave starts in."""

    totals: dict[int, int] = defaultdict(int)
    for leave in leaves:
        if leave.status != LeaveStatus.APPROVED or not month.contains(leave.from_date):
            continue
        totals[leave.employee_id] += int(leave.days or 0)
    return dict(totals)


def aggregate_payroll(
    month: Month,
    employees: Sequence[Employee],
    attendance: Iterable[AttendanceRecord],
    leaves: Iterable[LeaveRecord],
    *,
    calculator: Optional[PayrollCalculator] = None,
) -> list[PayrollRow]:
    calculator = calculator or StandardPayrollCalculator()
    tallies = tally_attendance(attendance, month)
    leave_days = leave_days_by_employee(leaves, month)

    rows: list[PayrollRow] = []
    for emp in employees:
        tally = tallies.get(emp.employee_id, AttendanceTally())
        gross = float(emp.salary or 0)
        pay = calculator.adjust(gross, tally)
        rows.append(
            PayrollRow(
                employee=emp,
                present_days=tally.present,
                absent_days=tally.absent,
                late_days=tally.late,
                leave_days=leave_days.get(emp.employee_id, 0),
                gross_salary=gross,
                deductions=pay.deductions,
                net_salary=pay.net_salary,
            )
        )
    return rows


def summarize(rows: Sequence[PayrollRow]) -> PayrollSummary:
    total = sum(r.net_salary for r in rows)
    count = len(rows)
    return PayrollSummary(
        total_payroll=total,
        employee_count=count,
        average_net_pay=to_whole_amount(total / count) if count else 0,
    )
