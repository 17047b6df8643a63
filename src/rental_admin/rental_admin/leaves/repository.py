from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus, LeaveType
from .model import LeaveRecord


class LeaveRepository(Protocol):
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
        raise NotImplementedError

    def get_by_id(self, leave_id: int) -> Optional[LeaveRecord]:
        raise NotImplementedError

    def list_leaves(
        self,
        *,
        employee_id: Optional[int] = None,
        status: Optional[LeaveStatus] = None,
        limit: Optional[int] = None,
    ) -> Sequence[LeaveRecord]:
        """Newest applied first; no limit when limit is None."""

        raise NotImplementedError

    def decide_leave(self, *, leave_id: int, status: LeaveStatus) -> bool:
        """Move a pending request to approved/rejected. False when it is not pending."""

        raise NotImplementedError
