from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import AttendanceTally, PayAdjustment


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def adjust(self, gross_salary: float, tally: AttendanceTally) -> PayAdjustment:
        raise NotImplementedError
