from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import parse_iso_date
from ..common.validators import as_text, parse_optional_amount, require_choice, require_non_empty
from ..core.constants import DEFAULT_HISTORY_LIMIT, DEPARTMENTS
from ..core.enums import AttendanceStatus, EmployeeStatus, Role
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmployeeStats:
    total: int
    active: int
    admins: int


@dataclass(frozen=True)
class EmployeeProfile:
    employee: Employee
    recent_attendance: list
    present_days: int


def _clean_department(value: Optional[str]) -> Optional[str]:
    v = as_text(value, "Department")
    if not v:
        return None
    if v not in DEPARTMENTS:
        raise ValidationError(f"Department must be one of: {', '.join(DEPARTMENTS)}")
    return v


class EmployeeService:
    """Use case: manage employee profiles (admin)."""

    def __init__(self, employees: EmployeeRepository, attendance: Optional[AttendanceRepository] = None):
        self._employees = employees
        self._attendance = attendance

    def get(self, employee_id: int) -> Employee:
        emp = self._employees.get_by_id(int(employee_id))
        if not emp:
            raise NotFoundError("Employee not found")
        return emp

    def create_employee(
        self,
        *,
        name: str,
        email: str,
        role: str = Role.EMPLOYEE.value,
        department: str = "",
        phone: str = "",
        salary=None,
        join_date: str = "",
        today: Optional[date] = None,
    ) -> int:
        name = require_non_empty(name, "Name")
        email = require_non_empty(email, "Email").lower()
        role_v = require_choice(role or Role.EMPLOYEE.value, Role, "Role")
        department_v = _clean_department(department)
        salary_v = parse_optional_amount(salary, "Salary")
        joined = parse_iso_date(join_date) if as_text(join_date, "Join date") else (today or date.today())

        if self._employees.get_by_email(email):
            raise ValidationError("An employee with this email already exists")

        employee_id = self._employees.create_employee(
            name=name,
            email=email,
            role=role_v,
            department=department_v,
            phone=as_text(phone, "Phone") or None,
            salary=salary_v,
            join_date=joined,
        )
        log.info("created employee %s (%s)", employee_id, role_v.value)
        return employee_id

    def update_employee(self, employee_id: int, **fields) -> Employee:
        self.get(employee_id)

        changes: dict = {}
        if "name" in fields:
            changes["name"] = require_non_empty(fields["name"], "Name")
        if "phone" in fields:
            changes["phone"] = as_text(fields["phone"], "Phone") or None
        if "role" in fields:
            changes["role"] = require_choice(fields["role"], Role, "Role")
        if "department" in fields:
            changes["department"] = _clean_department(fields["department"])
        if "salary" in fields:
            changes["salary"] = parse_optional_amount(fields["salary"], "Salary")
        if "join_date" in fields:
            changes["join_date"] = parse_iso_date(fields["join_date"]) if fields["join_date"] else None

        if not changes:
            raise ValidationError("Nothing to update")

        self._employees.update_employee(int(employee_id), changes=changes)
        return self.get(employee_id)

    def set_status(self, employee_id: int, status: str) -> Employee:
        status_v = require_choice(status, EmployeeStatus, "Status")
        self.get(employee_id)
        self._employees.set_status(int(employee_id), status=status_v)
        log.info("employee %s is now %s", employee_id, status_v.value)
        return self.get(employee_id)

    def toggle_status(self, employee_id: int) -> Employee:
        emp = self.get(employee_id)
        new_status = EmployeeStatus.INACTIVE if emp.is_active else EmployeeStatus.ACTIVE
        return self.set_status(employee_id, new_status.value)

    def list_employees(self, *, search: str = "", role: str = "all") -> list[Employee]:
        term = (search or "").strip().lower()
        role_v = None if (role or "all").strip().lower() == "all" else require_choice(role, Role, "Role")

        out = []
        for e in self._employees.list_all():
            if term and not any(term in (v or "").lower() for v in (e.name, e.email, e.department)):
                continue
            if role_v is not None and e.role != role_v:
                continue
            out.append(e)
        return out

    def stats(self) -> EmployeeStats:
        everyone = list(self._employees.list_all())
        return EmployeeStats(
            total=len(everyone),
            active=sum(1 for e in everyone if e.is_active),
            admins=sum(1 for e in everyone if e.role in (Role.ADMIN, Role.MANAGER)),
        )

    def get_profile(self, employee_id: int, *, limit: int = DEFAULT_HISTORY_LIMIT) -> EmployeeProfile:
        emp = self.get(employee_id)
        history = list(self._attendance.get_recent_for_employee(emp.employee_id, limit)) if self._attendance else []
        present = sum(1 for r in history if r.status in (AttendanceStatus.PRESENT, AttendanceStatus.LATE))
        return EmployeeProfile(employee=emp, recent_attendance=history, present_days=present)
