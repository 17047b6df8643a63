from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.validators import as_text, require_amount, require_non_empty
from ..core.enums import EquipmentStatus, RentalStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import Equipment, Rental, RentalQuote
from .repository import EquipmentRepository, RentalRepository

log = logging.getLogger(__name__)


def rental_days(start: date, end: date) -> int:
    """Billable days between the two dates; a same-day hire is one day."""

    return abs((end - start).days) or 1


class InventoryService:
    def __init__(self, equipment: EquipmentRepository):
        self._equipment = equipment

    def add_equipment(
        self,
        *,
        name: str,
        category: str,
        item_code: str,
        daily_rate,
        description: str = "",
    ) -> int:
        equipment_id = self._equipment.create_equipment(
            name=require_non_empty(name, "Name"),
            category=require_non_empty(category, "Category"),
            item_code=require_non_empty(item_code, "Item code").upper(),
            daily_rate=require_amount(daily_rate, "Daily rate"),
            description=as_text(description, "Description") or None,
        )
        log.info("added equipment %s (%s)", equipment_id, item_code)
        return equipment_id

    def search_equipment(self, term: str = "") -> list[Equipment]:
        t = (term or "").strip().lower()
        items = self._equipment.list_all()
        if not t:
            return list(items)
        return [e for e in items if t in e.name.lower() or t in e.item_code.lower()]

    def list_available(self) -> list[Equipment]:
        return list(self._equipment.list_all(status=EquipmentStatus.AVAILABLE))


class RentalService:
    def __init__(self, rentals: RentalRepository, equipment: EquipmentRepository):
        self._rentals = rentals
        self._equipment = equipment

    def quote(self, *, start_date: date, end_date: date, equipment_ids: Sequence[int]) -> RentalQuote:
        days = rental_days(start_date, end_date)
        lines = []
        for eid in dict.fromkeys(int(i) for i in equipment_ids):
            item = self._equipment.get_by_id(eid)
            if item:
                lines.append((item, item.daily_rate * days))
        return RentalQuote(days=days, lines=tuple(lines), total=sum(amount for _, amount in lines))

    def create_booking(
        self,
        *,
        customer_name: str,
        customer_phone: str,
        start_date: date,
        end_date: date,
        equipment_ids: Sequence[int],
        now: Optional[datetime] = None,
    ) -> int:
        name = require_non_empty(customer_name, "Customer name")
        phone = require_non_empty(customer_phone, "Customer phone")
        if end_date < start_date:
            raise ValidationError("End date must be on or after start date")

        ids = list(dict.fromkeys(int(i) for i in equipment_ids))
        if not ids:
            raise ValidationError("Select at least one equipment item")

        for eid in ids:
            item = self._equipment.get_by_id(eid)
            if not item:
                raise NotFoundError(f"Equipment {eid} not found")
            if item.status != EquipmentStatus.AVAILABLE:
                raise ValidationError(f"{item.name} is not available ({item.status.value})")

        quote = self.quote(start_date=start_date, end_date=end_date, equipment_ids=ids)
        rental_id = self._rentals.create_rental(
            customer_name=name,
            customer_phone=phone,
            start_date=start_date,
            end_date=end_date,
            equipment_ids=ids,
            total_amount=quote.total,
            created_at=now or datetime.now(),
        )
        self._equipment.set_status(ids, status=EquipmentStatus.RENTED)
        log.info("rental %s booked for %s: %s items, %s days, total %.2f", rental_id, name, len(ids), quote.days, quote.total)
        return rental_id

    def complete_booking(self, rental_id: int, *, now: Optional[datetime] = None) -> Rental:
        rental = self._rentals.get_by_id(int(rental_id))
        if not rental:
            raise NotFoundError("Rental not found")
        if rental.status != RentalStatus.ACTIVE:
            raise ValidationError("Rental is already completed")

        if not self._rentals.complete_rental(int(rental_id), returned_at=now or datetime.now()):
            raise ValidationError("Rental is already completed")

        self._equipment.set_status(rental.equipment_ids, status=EquipmentStatus.AVAILABLE)
        log.info("rental %s completed", rental_id)
        return self._rentals.get_by_id(int(rental_id)) or rental

    def search_rentals(self, term: str = "") -> list[Rental]:
        t = (term or "").strip()
        items = self._rentals.list_all()
        if not t:
            return list(items)
        return [r for r in items if t.lower() in r.customer_name.lower() or t in r.customer_phone]
