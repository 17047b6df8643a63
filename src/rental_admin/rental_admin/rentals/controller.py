from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.http import json_body, ok
from ..core.exceptions import ValidationError
from ..container import Container


def _equipment_ids(data: dict) -> list[int]:
    raw = data.get("equipment_ids") or []
    if not isinstance(raw, list):
        raise ValidationError("equipment_ids must be a list")
    try:
        return [int(i) for i in raw]
    except (TypeError, ValueError):
        raise ValidationError("equipment_ids must be integers")


def register(app: Flask, container: Container) -> None:
    inventory = container.inventory_service
    rentals = container.rental_service

    @app.get("/api/equipment")
    def list_equipment():
        if request.args.get("available") in ("1", "true"):
            items = inventory.list_available()
        else:
            items = inventory.search_equipment(request.args.get("search", ""))
        return ok([e.to_dict() for e in items])

    @app.post("/api/equipment")
    def add_equipment():
        data = json_body()
        equipment_id = inventory.add_equipment(
            name=data.get("name", ""),
            category=data.get("category", ""),
            item_code=data.get("item_code", ""),
            daily_rate=data.get("daily_rate"),
            description=data.get("description", ""),
        )
        return ok({"equipment_id": equipment_id}, status=201)

    @app.get("/api/rentals")
    def list_rentals():
        return ok([r.to_dict() for r in rentals.search_rentals(request.args.get("search", ""))])

    @app.post("/api/rentals/quote")
    def quote_rental():
        data = json_body()
        quote = rentals.quote(
            start_date=parse_iso_date(data.get("start_date", "")),
            end_date=parse_iso_date(data.get("end_date", "")),
            equipment_ids=_equipment_ids(data),
        )
        return ok(quote.to_dict())

    @app.post("/api/rentals")
    def create_rental():
        data = json_body()
        rental_id = rentals.create_booking(
            customer_name=data.get("customer_name", ""),
            customer_phone=data.get("customer_phone", ""),
            start_date=parse_iso_date(data.get("start_date", "")),
            end_date=parse_iso_date(data.get("end_date", "")),
            equipment_ids=_equipment_ids(data),
            now=now_local(),
        )
        return ok({"rental_id": rental_id}, status=201)

    @app.post("/api/rentals/<int:rental_id>/complete")
    def complete_rental(rental_id: int):
        return ok(rentals.complete_booking(rental_id, now=now_local()).to_dict())
