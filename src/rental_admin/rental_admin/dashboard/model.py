from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..leaves.model import LeaveRecord


@dataclass(frozen=True)
class DashboardSnapshot:
    """Admin landing-page counters for one day. Read-model, never persisted."""

    as_of: date
    active_employees: int
    present_today: int
    on_leave_today: int
    pending_leaves: int
    total_equipment: int
    available_equipment: int
    equipment_in_maintenance: int
    active_rentals: int
    recent_leaves: tuple[LeaveRecord, ...] = ()

    def to_dict(self) -> dict:
        return {
            "as_of": self.as_of.strftime("%Y-%m-%d"),
            "kpis": {
                "active_employees": self.active_employees,
                "present_today": self.present_today,
                "on_leave_today": self.on_leave_today,
                "pending_leaves": self.pending_leaves,
                "total_equipment": self.total_equipment,
                "available_equipment": self.available_equipment,
                "equipment_in_maintenance": self.equipment_in_maintenance,
                "active_rentals": self.active_rentals,
            },
            "recent_leaves": [lv.to_dict() for lv in self.recent_leaves],
        }
