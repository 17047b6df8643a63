from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.http import ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.dashboard_service

    @app.get("/api/dashboard")
    def dashboard():
        raw = request.args.get("date", "")
        today = parse_iso_date(raw) if raw.strip() else now_local().date()
        return ok(service.snapshot(today).to_dict())
