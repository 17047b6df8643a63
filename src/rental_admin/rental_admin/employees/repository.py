from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import EmployeeStatus, Role
from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): services depend on this interface, never on a concrete database.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        """All employees ordered by name."""

        raise NotImplementedError

    def list_active(self) -> Sequence[Employee]:
        """Employees with status == active, ordered by name."""

        raise NotImplementedError

    def create_employee(
        self,
        *,
        name: str,
        email: str,
        role: Role,
        department: Optional[str],
        phone: Optional[str],
        salary: Optional[float],
        join_date: date,
    ) -> int:
        raise NotImplementedError

    def update_employee(self, employee_id: int, *, changes: dict) -> bool:
        raise NotImplementedError

    def set_status(self, employee_id: int, *, status: EmployeeStatus) -> bool:
        raise NotImplementedError
