from __future__ import annotations

from ...common.rounding import to_whole_amount
from ...core.constants import DEFAULT_LATE_PENALTY_FRACTION, DEFAULT_WORKING_DAYS_PER_MONTH
from ..model import AttendanceTally, PayAdjustment
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: each absent day docks a day's pay, each late day a fraction of it.

    per_day = gross / working_days; deductions rounded to whole currency units;
    net never below 0.
    """

    def __init__(
        self,
        *,
        working_days: int = DEFAULT_WORKING_DAYS_PER_MONTH,
        late_penalty_fraction: float = DEFAULT_LATE_PENALTY_FRACTION,
    ):
        if int(working_days) <= 0:
            raise ValueError("working_days must be positive")
        if not 0 <= float(late_penalty_fraction) <= 1:
            raise ValueError("late_penalty_fraction must be between 0 and 1")
        self.working_days = int(working_days)
        self.late_penalty_fraction = float(late_penalty_fraction)

    def adjust(self, gross_salary: float, tally: AttendanceTally) -> PayAdjustment:
        gross = float(gross_salary or 0)
        per_day = gross / self.working_days
        late_deduction = tally.late * (per_day * self.late_penalty_fraction)
        absent_deduction = tally.absent * per_day
        deductions = to_whole_amount(late_deduction + absent_deduction)
        return PayAdjustment(
            per_day=per_day,
            late_deduction=late_deduction,
            absent_deduction=absent_deduction,
            deductions=deductions,
            net_salary=max(0.0, gross - deductions),
        )
