from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.http import json_body, ok
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.leave_service

    @app.get("/api/leaves")
    def list_leaves():
        employee_id = request.args.get("employee_id", type=int)
        return ok([lv.to_dict() for lv in service.list_leaves(employee_id=employee_id)])

    @app.post("/api/leaves")
    def apply_leave():
        data = json_body()
        try:
            employee_id = int(data.get("employee_id"))
        except (TypeError, ValueError):
            raise ValidationError("employee_id is required")

        leave_id = service.apply_leave(
            employee_id=employee_id,
            leave_type=data.get("leave_type", ""),
            from_date=parse_iso_date(data.get("from_date", "")),
            to_date=parse_iso_date(data.get("to_date", "")),
            reason=data.get("reason", ""),
            now=now_local(),
        )
        return ok({"leave_id": leave_id}, status=201)

    @app.post("/api/leaves/<int:leave_id>/approve")
    def approve_leave(leave_id: int):
        return ok(service.approve_leave(leave_id).to_dict())

    @app.post("/api/leaves/<int:leave_id>/reject")
    def reject_leave(leave_id: int):
        return ok(service.reject_leave(leave_id).to_dict())
