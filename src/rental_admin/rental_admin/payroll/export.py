from __future__ import annotations

from ..common.http import write_csv
from ..common.rounding import to_whole_amount
from .model import PayrollReport

PAYROLL_HEADER = (
    "Name",
    "Department",
    "Gross (₹)",
    "Present Days",
    "Absent Days",
    "Late",
    "Leaves",
    "Deductions (₹)",
    "Net Pay (₹)",
)


def export_payroll_csv(report: PayrollReport) -> str:
    """Payroll sheet: one line per employee, amounts as plain integers."""

    return write_csv(
        PAYROLL_HEADER,
        (
            (
                r.employee.name,
                r.employee.department or "",
                to_whole_amount(r.gross_salary),
                r.present_days,
                r.absent_days,
                r.late_days,
                r.leave_days,
                r.deductions,
                to_whole_amount(r.net_salary),
            )
            for r in report.rows
        ),
    )


def payroll_filename(report: PayrollReport) -> str:
    return f"payroll_{report.month}.csv"
