from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..core.enums import EquipmentStatus, RentalStatus


@dataclass(frozen=True)
class Equipment:
    equipment_id: int
    name: str
    category: str
    item_code: str
    daily_rate: float
    status: EquipmentStatus = EquipmentStatus.AVAILABLE
    description: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "equipment_id": self.equipment_id,
            "name": self.name,
            "category": self.category,
            "item_code": self.item_code,
            "daily_rate": self.daily_rate,
            "status": self.status.value,
            "description": self.description,
        }


@dataclass(frozen=True)
class Rental:
    rental_id: int
    customer_name: str
    customer_phone: str
    start_date: date
    end_date: date
    total_amount: float
    status: RentalStatus
    equipment_ids: tuple[int, ...] = field(default_factory=tuple)
    created_at: Optional[datetime] = None
    actual_return_date: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "rental_id": self.rental_id,
            "customer_name": self.customer_name,
            "customer_phone": self.customer_phone,
            "start_date": self.start_date.strftime("%Y-%m-%d"),
            "end_date": self.end_date.strftime("%Y-%m-%d"),
            "total_amount": self.total_amount,
            "status": self.status.value,
            "equipment_ids": list(self.equipment_ids),
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "actual_return_date": self.actual_return_date.isoformat() if self.actual_return_date else None,
        }


@dataclass(frozen=True)
class RentalQuote:
    days: int
    lines: tuple[tuple[Equipment, float], ...]
    total: float

    def to_dict(self) -> dict:
        return {
            "days": self.days,
            "lines": [{"equipment_id": e.equipment_id, "name": e.name, "amount": amount} for e, amount in self.lines],
            "total": self.total,
        }
