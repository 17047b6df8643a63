from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..core.enums import AttendanceStatus, EquipmentStatus, LeaveStatus, RentalStatus
from ..employees.repository import EmployeeRepository
from ..leaves.repository import LeaveRepository
from ..rentals.repository import EquipmentRepository, RentalRepository
from .model import DashboardSnapshot

log = logging.getLogger(__name__)

RECENT_LEAVES_LIMIT = 5


class DashboardService:
    """Use case: the admin overview of staff, leave and fleet for a day."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        leaves: LeaveRepository,
        equipment: EquipmentRepository,
        rentals: RentalRepository,
    ):
        self._employees = employees
        self._attendance = attendance
        self._leaves = leaves
        self._equipment = equipment
        self._rentals = rentals

    def snapshot(self, today: Optional[date] = None) -> DashboardSnapshot:
        today = today or date.today()

        present = [
            r
            for r in self._attendance.list_for_date(today)
            if r.status in (AttendanceStatus.PRESENT, AttendanceStatus.LATE)
        ]
        on_leave = {
            lv.employee_id
            for lv in self._leaves.list_leaves(status=LeaveStatus.APPROVED)
            if lv.from_date <= today <= lv.to_date
        }
        items = list(self._equipment.list_all())

        snap = DashboardSnapshot(
            as_of=today,
            active_employees=len(self._employees.list_active()),
            present_today=len(present),
            on_leave_today=len(on_leave),
            pending_leaves=len(self._leaves.list_leaves(status=LeaveStatus.PENDING)),
            total_equipment=len(items),
            available_equipment=sum(1 for e in items if e.status != EquipmentStatus.RENTED),
            equipment_in_maintenance=sum(1 for e in items if e.status == EquipmentStatus.MAINTENANCE),
            active_rentals=sum(1 for r in self._rentals.list_all() if r.status == RentalStatus.ACTIVE),
            recent_leaves=tuple(self._leaves.list_leaves(limit=RECENT_LEAVES_LIMIT)),
        )
        log.debug("dashboard for %s: %s present, %s on leave", today, snap.present_today, snap.on_leave_today)
        return snap
