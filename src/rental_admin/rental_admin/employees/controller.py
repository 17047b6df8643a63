from __future__ import annotations

from flask import Flask, request

from ..common.http import json_body, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.get("/api/employees")
    def list_employees():
        items = service.list_employees(
            search=request.args.get("search", ""),
            role=request.args.get("role", "all"),
        )
        stats = service.stats()
        return ok([e.to_dict() for e in items], total=stats.total, active=stats.active, admins=stats.admins)

    @app.post("/api/employees")
    def create_employee():
        data = json_body()
        employee_id = service.create_employee(
            name=data.get("name", ""),
            email=data.get("email", ""),
            role=data.get("role") or "employee",
            department=data.get("department", ""),
            phone=data.get("phone", ""),
            salary=data.get("salary"),
            join_date=data.get("join_date", ""),
        )
        return ok(service.get(employee_id).to_dict(), status=201)

    @app.get("/api/employees/<int:employee_id>")
    def get_employee(employee_id: int):
        profile = service.get_profile(employee_id)
        data = profile.employee.to_dict()
        data["recent_attendance"] = [r.to_dict() for r in profile.recent_attendance]
        data["present_days"] = profile.present_days
        return ok(data)

    @app.patch("/api/employees/<int:employee_id>")
    def update_employee(employee_id: int):
        allowed = ("name", "phone", "role", "department", "salary", "join_date")
        data = json_body()
        emp = service.update_employee(employee_id, **{k: data[k] for k in allowed if k in data})
        return ok(emp.to_dict())

    @app.post("/api/employees/<int:employee_id>/status")
    def set_employee_status(employee_id: int):
        status = json_body().get("status")
        emp = service.set_status(employee_id, status) if status else service.toggle_status(employee_id)
        return ok(emp.to_dict())
