"""Example: run the payroll use case without Flask.

Prints one line per employee for the current month, then the totals.
"""

import importlib
import sys

from config import get_settings_module

from src.rental_admin.rental_admin.container import build_container


def main(month: str = ""):
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    report = container.payroll_service.build_report(month)
    print(f"Payroll {report.month}")
    for row in report.rows:
        print(
            f"  {row.employee.name:<24} present={row.present_days:>2} absent={row.absent_days:>2} "
            f"late={row.late_days:>2} leave={row.leave_days:>2} net={row.net_salary:,.0f}"
        )
    s = report.summary
    print(f"Total {s.total_payroll:,.0f} across {s.employee_count} employees (avg {s.average_net_pay:,})")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else "")
