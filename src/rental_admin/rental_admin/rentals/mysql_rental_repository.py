from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import EquipmentStatus, RentalStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Equipment, Rental
from .repository import EquipmentRepository, RentalRepository

_EQUIPMENT_COLUMNS = "equipment_id, name, category, item_code, daily_rate, status, description"
_RENTAL_COLUMNS = (
    "rental_id, customer_name, customer_phone, start_date, end_date, total_amount, status, created_at, actual_return_date"
)


def _row_to_equipment(r: dict) -> Equipment:
    return Equipment(
        equipment_id=int(r["equipment_id"]),
        name=r["name"],
        category=r["category"],
        item_code=r["item_code"],
        daily_rate=float(r["daily_rate"]),
        status=EquipmentStatus(r["status"]),
        description=r.get("description"),
    )


def _row_to_rental(r: dict, equipment_ids: Sequence[int]) -> Rental:
    return Rental(
        rental_id=int(r["rental_id"]),
        customer_name=r["customer_name"],
        customer_phone=r["customer_phone"],
        start_date=r["start_date"],
        end_date=r["end_date"],
        total_amount=float(r["total_amount"]),
        status=RentalStatus(r["status"]),
        equipment_ids=tuple(equipment_ids),
        created_at=r.get("created_at"),
        actual_return_date=r.get("actual_return_date"),
    )


class MySQLEquipmentRepository(EquipmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, equipment_id: int) -> Optional[Equipment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_EQUIPMENT_COLUMNS} FROM equipment WHERE equipment_id=%s", (int(equipment_id),))
            r = fetchone(cur)
            return _row_to_equipment(r) if r else None

    def list_all(self, *, status: Optional[EquipmentStatus] = None) -> Sequence[Equipment]:
        with db_cursor(self._conn_factory) as (_, cur):
            if status is None:
                cur.execute(f"SELECT {_EQUIPMENT_COLUMNS} FROM equipment ORDER BY name ASC")
            else:
                cur.execute(
                    f"SELECT {_EQUIPMENT_COLUMNS} FROM equipment WHERE status=%s ORDER BY name ASC",
                    (status.value,),
                )
            return [_row_to_equipment(r) for r in fetchall(cur)]

    def create_equipment(
        self,
        *,
        name: str,
        category: str,
        item_code: str,
        daily_rate: float,
        description: Optional[str],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO equipment(name, category, item_code, daily_rate, description, status)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (name, category, item_code, daily_rate, description, EquipmentStatus.AVAILABLE.value),
            )
            return int(cur.lastrowid)

    def set_status(self, equipment_ids: Sequence[int], *, status: EquipmentStatus) -> int:
        ids = [int(i) for i in equipment_ids]
        if not ids:
            return 0
        placeholders = ",".join(["%s"] * len(ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE equipment SET status=%s WHERE equipment_id IN ({placeholders})",
                tuple([status.value] + ids),
            )
            return cur.rowcount


class MySQLRentalRepository(RentalRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _items_for(self, cur, rental_ids: Sequence[int]) -> dict[int, list[int]]:
        if not rental_ids:
            return {}
        placeholders = ",".join(["%s"] * len(rental_ids))
        cur.execute(
            f"SELECT rental_id, equipment_id FROM rental_items WHERE rental_id IN ({placeholders}) ORDER BY equipment_id",
            tuple(rental_ids),
        )
        out: dict[int, list[int]] = {}
        for r in fetchall(cur):
            out.setdefault(int(r["rental_id"]), []).append(int(r["equipment_id"]))
        return out

    def get_by_id(self, rental_id: int) -> Optional[Rental]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_RENTAL_COLUMNS} FROM rentals WHERE rental_id=%s", (int(rental_id),))
            r = fetchone(cur)
            if not r:
                return None
            items = self._items_for(cur, [int(rental_id)])
            return _row_to_rental(r, items.get(int(rental_id), []))

    def list_all(self) -> Sequence[Rental]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_RENTAL_COLUMNS} FROM rentals ORDER BY start_date DESC, rental_id DESC")
            rows = fetchall(cur)
            items = self._items_for(cur, [int(r["rental_id"]) for r in rows])
            return [_row_to_rental(r, items.get(int(r["rental_id"]), [])) for r in rows]

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO rentals(customer_name, customer_phone, start_date, end_date, total_amount, status, created_at)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    customer_name,
                    customer_phone,
                    start_date,
                    end_date,
                    total_amount,
                    RentalStatus.ACTIVE.value,
                    created_at,
                ),
            )
            rental_id = int(cur.lastrowid)
            cur.executemany(
                "INSERT INTO rental_items(rental_id, equipment_id) VALUES(%s,%s)",
                [(rental_id, int(eid)) for eid in equipment_ids],
            )
            return rental_id

    def complete_rental(self, rental_id: int, *, returned_at: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE rentals
                SET status=%s, actual_return_date=%s
                WHERE rental_id=%s AND status=%s
                """,
                (RentalStatus.COMPLETED.value, returned_at, int(rental_id), RentalStatus.ACTIVE.value),
            )
            return cur.rowcount > 0
