from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import EmployeeStatus, Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, optional_float
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, name, email, role, department, phone, salary, join_date, status, created_at"

# Columns an admin edit may touch.
_EDITABLE = ("name", "phone", "role", "department", "salary", "join_date")


def _row_to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        name=r["name"],
        email=r["email"],
        role=Role(r["role"]),
        department=r.get("department") or None,
        phone=r.get("phone") or None,
        salary=optional_float(r.get("salary")),
        join_date=r.get("join_date"),
        status=EmployeeStatus(r["status"]),
        created_at=r.get("created_at"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (int(employee_id),))
            r = fetchone(cur)
            return _row_to_employee(r) if r else None

    def get_by_email(self, email: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE email=%s", (email,))
            r = fetchone(cur)
            return _row_to_employee(r) if r else None

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY name ASC")
            return [_row_to_employee(r) for r in fetchall(cur)]

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE status=%s ORDER BY name ASC",
                (EmployeeStatus.ACTIVE.value,),
            )
            return [_row_to_employee(r) for r in fetchall(cur)]

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(name, email, role, department, phone, salary, join_date, status)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (name, email, role.value, department, phone, salary, join_date, EmployeeStatus.ACTIVE.value),
            )
            return int(cur.lastrowid)

    def update_employee(self, employee_id: int, *, changes: dict) -> bool:
        fields = [k for k in _EDITABLE if k in changes]
        if not fields:
            return False

        params: list[object] = []
        for k in fields:
            v = changes[k]
            params.append(v.value if isinstance(v, Role) else v)
        params.append(int(employee_id))

        assignments = ", ".join(f"{k}=%s" for k in fields)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE employees SET {assignments} WHERE employee_id=%s", tuple(params))
            return cur.rowcount > 0

    def set_status(self, employee_id: int, *, status: EmployeeStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET status=%s WHERE employee_id=%s",
                (status.value, int(employee_id)),
            )
            return cur.rowcount > 0
