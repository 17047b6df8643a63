from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..core.exceptions import ValidationError
from .validators import as_text

_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")


@dataclass(frozen=True)
class Month:
    """A calendar month (``YYYY-MM``) with inclusive day boundaries."""

    year: int
    month: int

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return date(self.year, self.month, calendar.monthrange(self.year, self.month)[1])

    def contains(self, value: Optional[date]) -> bool:
        if value is None:
            return False
        return self.first_day <= value <= self.last_day

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(as_text(value, "Date"), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date (YYYY-MM-DD): {value!r}")


def parse_month(value: str) -> Month:
    """Parse YYYY-MM string into Month."""
    m = _MONTH_RE.match(as_text(value, "Month"))
    if not m:
        raise ValidationError(f"Invalid month (YYYY-MM): {value!r}")
    year, month = int(m.group(1)), int(m.group(2))
    if not 1 <= month <= 12:
        raise ValidationError(f"Invalid month (YYYY-MM): {value!r}")
    return Month(year=year, month=month)


def parse_hhmm(value: str) -> time:
    try:
        return datetime.strptime(as_text(value, "Time"), "%H:%M").time()
    except ValueError:
        raise ValidationError(f"Invalid time (HH:MM): {value!r}")


def current_month(today: Optional[date] = None) -> Month:
    today = today or date.today()
    return Month(year=today.year, month=today.month)


def inclusive_days(start: date, end: date) -> int:
    return (end - start).days + 1


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
