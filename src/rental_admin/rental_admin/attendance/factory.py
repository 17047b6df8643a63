from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time, timedelta

from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_clock_in(self, *, now: datetime, office_start: time, grace_minutes: int) -> AttendanceStrategy:
        # Minute precision: 09:15:59 is still inside a 15 minute grace.
        clocked = now.replace(second=0, microsecond=0)
        cutoff = datetime.combine(now.date(), office_start) + timedelta(minutes=grace_minutes)
        if clocked <= cutoff:
            return NormalStrategy()
        return LateStrategy()
