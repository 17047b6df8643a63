from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from typing import Optional, Union

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import Month, current_month, parse_month
from ..common.validators import as_text
from ..core.enums import LeaveStatus
from ..core.exceptions import DataFetchError
from ..employees.repository import EmployeeRepository
from ..leaves.repository import LeaveRepository
from .aggregator import aggregate_payroll, summarize
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollReport
from .tracker import PayrollRunTracker

log = logging.getLogger(__name__)


class PayrollService:
    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        leaves: LeaveRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        tracker: Optional[PayrollRunTracker] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._leaves = leaves
        self._calculator = calculator or StandardPayrollCalculator()
        self._tracker = tracker or PayrollRunTracker()

    @staticmethod
    def resolve_month(value: Union[str, Month, None]) -> Month:
        if isinstance(value, Month):
            return value
        if not as_text(value, "Month"):
            return current_month()
        return parse_month(value)

    def _fetch(self, month: Month):
        """Read roster, month attendance and approved leave side by side.

        All three must succeed; any failure fails the whole computation.
        """

        with ThreadPoolExecutor(max_workers=3, thread_name_prefix="payroll-fetch") as pool:
            employees_f = pool.submit(self._employees.list_active)
            attendance_f = pool.submit(
                self._attendance.list_between, start_date=month.first_day, end_date=month.last_day
            )
            leaves_f = pool.submit(self._leaves.list_leaves, status=LeaveStatus.APPROVED)
            try:
                return list(employees_f.result()), list(attendance_f.result()), list(leaves_f.result())
            except Exception as e:
                log.warning("payroll fetch for %s failed: %s", month, e)
                raise DataFetchError(f"Could not load payroll data for {month}") from e

    def build_report(self, month: Union[str, Month, None] = None) -> PayrollReport:
        month_v = self.resolve_month(month)
        employees, attendance, leaves = self._fetch(month_v)

        rows = aggregate_payroll(month_v, employees, attendance, leaves, calculator=self._calculator)
        report = PayrollReport(month=month_v, rows=tuple(rows), summary=summarize(rows))
        log.info(
            "payroll %s: %s employees, total net %.2f",
            month_v,
            report.summary.employee_count,
            report.summary.total_payroll,
        )
        return report

    def refresh(self, month: Union[str, Month, None] = None) -> Optional[PayrollReport]:
        """Recompute for a newly selected month.

        Returns None when a newer refresh was issued while this one was loading.
        """

        run = self._tracker.begin(self.resolve_month(month))
        report = replace(self.build_report(run.month), run_seq=run.seq)
        if not self._tracker.complete(run, report):
            return None
        return report

    def latest(self) -> Optional[PayrollReport]:
        return self._tracker.latest
