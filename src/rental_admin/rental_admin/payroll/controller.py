from __future__ import annotations

from flask import Flask, request

from ..common.http import csv_response, fail, json_body, ok
from ..container import Container
from .export import export_payroll_csv, payroll_filename


def register(app: Flask, container: Container) -> None:
    service = container.payroll_service

    @app.get("/api/payroll")
    def payroll_report():
        report = service.build_report(request.args.get("month", ""))
        return ok(report.to_dict())

    @app.get("/api/payroll.csv")
    def export_payroll():
        report = service.build_report(request.args.get("month", ""))
        return csv_response(export_payroll_csv(report), filename=payroll_filename(report))

    @app.post("/api/payroll/refresh")
    def refresh_payroll():
        report = service.refresh(json_body().get("month", ""))
        if report is None:
            return fail("A newer payroll refresh superseded this one", status=409, code="SUPERSEDED")
        return ok(report.to_dict())

    @app.get("/api/payroll/latest")
    def latest_payroll():
        report = service.latest()
        if report is None:
            return fail("No payroll has been computed yet", status=404, code="NOT_FOUND")
        return ok(report.to_dict())
