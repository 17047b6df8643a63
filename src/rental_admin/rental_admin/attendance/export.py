from __future__ import annotations

from ..common.http import write_csv
from .model import DailyRegister

REGISTER_HEADER = ("Name", "Date", "Clock In", "Clock Out", "Status", "Hours")


def _fmt_hours(value) -> str:
    return "" if value is None else f"{value:g}"


def export_register_csv(register: DailyRegister) -> str:
    return write_csv(
        REGISTER_HEADER,
        (
            (
                row.employee_name,
                register.work_date.strftime("%Y-%m-%d"),
                row.record.clock_in.strftime("%H:%M:%S") if row.record.clock_in else "",
                row.record.clock_out.strftime("%H:%M:%S") if row.record.clock_out else "",
                row.record.status.value,
                _fmt_hours(row.record.hours_worked),
            )
            for row in register.rows
        ),
    )


def register_filename(register: DailyRegister) -> str:
    return f"attendance_{register.work_date.strftime('%Y-%m-%d')}.csv"
