from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import EquipmentStatus, RentalStatus
from .model import Equipment, Rental


class EquipmentRepository(Protocol):
    def get_by_id(self, equipment_id: int) -> Optional[Equipment]:
        raise NotImplementedError

    def list_all(self, *, status: Optional[EquipmentStatus] = None) -> Sequence[Equipment]:
        raise NotImplementedError

    def create_equipment(
        self,
        *,
        name: str,
        category: str,
        item_code: str,
        daily_rate: float,
        description: Optional[str],
    ) -> int:
        raise NotImplementedError

    def set_status(self, equipment_ids: Sequence[int], *, status: EquipmentStatus) -> int:
        raise NotImplementedError


class RentalRepository(Protocol):
    def get_by_id(self, rental_id: int) -> Optional[Rental]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Rental]:
        """Newest start date first."""

        raise NotImplementedError

    def create_rental(
        self,
        *,
        customer_name: str,
        customer_phone: str,
        start_date: date,
        end_date: date,
        equipment_ids: Sequence[int],
        total_amount: float,
        created_at: datetime,
    ) -> int:
        raise NotImplementedError

    def complete_rental(self, rental_id: int, *, returned_at: datetime) -> bool:
        """Mark an active rental completed. False when it is not active."""

        raise NotImplementedError
