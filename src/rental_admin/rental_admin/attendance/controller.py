from __future__ import annotations

from datetime import date

from flask import Flask, request

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.http import csv_response, json_body, ok
from ..common.validators import as_text
from ..core.exceptions import ValidationError
from ..container import Container
from .export import export_register_csv, register_filename
from .model import GeoPoint


def _location(data: dict):
    lat, lng = data.get("lat"), data.get("lng")
    if lat is None or lng is None:
        return None
    try:
        return GeoPoint(lat=float(lat), lng=float(lng))
    except (TypeError, ValueError):
        raise ValidationError("Location must be numeric lat/lng")


def _employee_id(data: dict) -> int:
    try:
        return int(data.get("employee_id"))
    except (TypeError, ValueError):
        raise ValidationError("employee_id is required")


def _date_arg(value) -> date:
    return parse_iso_date(value) if as_text(value, "Date") else now_local().date()


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.get("/api/attendance")
    def daily_register():
        register_ = service.daily_register(
            _date_arg(request.args.get("date")),
            search=request.args.get("search", ""),
        )
        return ok(register_.to_dict())

    @app.get("/api/attendance.csv")
    def export_register():
        register_ = service.daily_register(_date_arg(request.args.get("date")))
        return csv_response(export_register_csv(register_), filename=register_filename(register_))

    @app.post("/api/attendance/clock-in")
    def clock_in():
        data = json_body()
        record = service.clock_in(_employee_id(data), now=now_local(), location=_location(data))
        return ok(record.to_dict(), status=201)

    @app.post("/api/attendance/clock-out")
    def clock_out():
        record = service.clock_out(_employee_id(json_body()), now=now_local())
        return ok(record.to_dict())

    @app.get("/api/attendance/<int:employee_id>/history")
    def attendance_history(employee_id: int):
        limit = request.args.get("limit", type=int) or 30
        return ok([r.to_dict() for r in service.history(employee_id, limit=limit)])

    @app.post("/api/attendance/<int:employee_id>/mark")
    def mark_attendance(employee_id: int):
        data = json_body()
        record = service.mark_status(employee_id, _date_arg(data.get("date")), data.get("status", ""))
        return ok(record.to_dict())
