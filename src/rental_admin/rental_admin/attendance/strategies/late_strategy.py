from __future__ import annotations

from datetime import datetime, time

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Late clock-in."""

    def decide_clock_in(self, *, now: datetime, office_start: time, grace_minutes: int) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.LATE)
