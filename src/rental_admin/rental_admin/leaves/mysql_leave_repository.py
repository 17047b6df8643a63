from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import LeaveStatus, LeaveType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import LeaveRecord
from .repository import LeaveRepository

_SELECT = """
    SELECT l.leave_id, l.employee_id, e.name AS employee_name, l.leave_type,
           l.from_date, l.to_date, l.days, l.reason, l.status, l.applied_at
    FROM leave_requests l
    JOIN employees e ON e.employee_id = l.employee_id
"""


def _row_to_leave(r: dict) -> LeaveRecord:
    return LeaveRecord(
        leave_id=int(r["leave_id"]),
        employee_id=int(r["employee_id"]),
        employee_name=r.get("employee_name"),
        leave_type=LeaveType(r["leave_type"]),
        from_date=r["from_date"],
        to_date=r["to_date"],
        days=int(r["days"] or 0),
        reason=r.get("reason") or "",
        status=LeaveStatus(r["status"]),
        applied_at=r["applied_at"],
    )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_leave(
        self,
        *,
        employee_id: int,
        leave_type: LeaveType,
        from_date: date,
        to_date: date,
        days: int,
        reason: str,
        applied_at: datetime,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO leave_requests(employee_id, leave_type, from_date, to_date, days, reason, status, applied_at)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(employee_id),
                    leave_type.value,
                    from_date,
                    to_date,
                    int(days),
                    reason,
                    LeaveStatus.PENDING.value,
                    applied_at,
                ),
            )
            return int(cur.lastrowid)

    def get_by_id(self, leave_id: int) -> Optional[LeaveRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE l.leave_id=%s", (int(leave_id),))
            r = fetchone(cur)
            return _row_to_leave(r) if r else None

    def list_leaves(
        self,
        *,
        employee_id: Optional[int] = None,
        status: Optional[LeaveStatus] = None,
        limit: Optional[int] = None,
    ) -> Sequence[LeaveRecord]:
        clauses = ["1=1"]
        params: list[object] = []

        if employee_id is not None:
            clauses.append("l.employee_id=%s")
            params.append(int(employee_id))
        if status is not None:
            clauses.append("l.status=%s")
            params.append(status.value)

        where = " AND ".join(clauses)
        sql = _SELECT + f" WHERE {where} ORDER BY l.applied_at DESC"
        if limit is not None:
            sql += " LIMIT %s"
            params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [_row_to_leave(r) for r in fetchall(cur)]

    def decide_leave(self, *, leave_id: int, status: LeaveStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE leave_requests SET status=%s WHERE leave_id=%s AND status=%s",
                (status.value, int(leave_id), LeaveStatus.PENDING.value),
            )
            return cur.rowcount > 0
