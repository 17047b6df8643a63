from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import inclusive_days
from ..common.validators import as_text, require_choice
from ..core.constants import DEFAULT_LIST_LIMIT
from ..core.enums import LeaveStatus, LeaveType
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import LeaveRecord
from .repository import LeaveRepository

log = logging.getLogger(__name__)


class LeaveService:
    def __init__(self, leaves: LeaveRepository, employees: EmployeeRepository):
        self._leaves = leaves
        self._employees = employees

    def apply_leave(
        self,
        *,
        employee_id: int,
        leave_type: str,
        from_date: date,
        to_date: date,
        reason: str = "",
        now: Optional[datetime] = None,
    ) -> int:
        if not self._employees.get_by_id(int(employee_id)):
            raise NotFoundError("Employee not found")

        type_v = require_choice(leave_type or LeaveType.CASUAL.value, LeaveType, "Leave type")
        if to_date < from_date:
            raise ValidationError("To date must be on or after from date")

        days = inclusive_days(from_date, to_date)
        leave_id = self._leaves.create_leave(
            employee_id=int(employee_id),
            leave_type=type_v,
            from_date=from_date,
            to_date=to_date,
            days=days,
            reason=as_text(reason, "Reason"),
            applied_at=now or datetime.now(),
        )
        log.info("leave %s applied by employee %s (%s, %s days)", leave_id, employee_id, type_v.value, days)
        return leave_id

    def _decide(self, leave_id: int, status: LeaveStatus) -> LeaveRecord:
        leave = self._leaves.get_by_id(int(leave_id))
        if not leave:
            raise NotFoundError("Leave request not found")
        if leave.status != LeaveStatus.PENDING:
            raise ValidationError("Leave request was already decided")

        if not self._leaves.decide_leave(leave_id=int(leave_id), status=status):
            raise ValidationError("Leave request was already decided")

        log.info("leave %s %s", leave_id, status.value)
        return self._leaves.get_by_id(int(leave_id)) or leave

    def approve_leave(self, leave_id: int) -> LeaveRecord:
        return self._decide(leave_id, LeaveStatus.APPROVED)

    def reject_leave(self, leave_id: int) -> LeaveRecord:
        return self._decide(leave_id, LeaveStatus.REJECTED)

    def list_leaves(self, *, employee_id: Optional[int] = None) -> list[LeaveRecord]:
        return list(self._leaves.list_leaves(employee_id=employee_id, limit=DEFAULT_LIST_LIMIT))
