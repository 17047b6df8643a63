from __future__ import annotations

from datetime import date
from types import SimpleNamespace

import pytest

from src.rental_admin.rental_admin.attendance.service import AttendanceService
from src.rental_admin.rental_admin.core.enums import AttendanceStatus, Role
from src.rental_admin.rental_admin.dashboard.service import DashboardService
from src.rental_admin.rental_admin.employees.service import EmployeeService
from src.rental_admin.rental_admin.leaves.service import LeaveService
from src.rental_admin.rental_admin.main import create_app
from src.rental_admin.rental_admin.payroll.service import PayrollService
from src.rental_admin.rental_admin.rentals.service import InventoryService, RentalService

from tests.fakes import (
    FakeAttendanceRepo,
    FakeEmployeesRepo,
    FakeEquipmentRepo,
    FakeLeavesRepo,
    FakeRentalsRepo,
    make_employee,
    make_equipment,
    record,
)


@pytest.fixture
def fake_container():
    employees = FakeEmployeesRepo([make_employee(1, "Asha", role=Role.ADMIN), make_employee(2, "Ravi")])
    attendance = FakeAttendanceRepo([record(2, date(2025, 3, 3), AttendanceStatus.ABSENT)])
    leaves = FakeLeavesRepo()
    equipment = FakeEquipmentRepo([make_equipment(1)])
    rentals = FakeRentalsRepo()
    return SimpleNamespace(
        employee_service=EmployeeService(employees, attendance),
        attendance_service=AttendanceService(attendance, employees),
        leave_service=LeaveService(leaves, employees),
        payroll_service=PayrollService(employees, attendance, leaves),
        inventory_service=InventoryService(equipment),
        rental_service=RentalService(rentals, equipment),
        dashboard_service=DashboardService(employees, attendance, leaves, equipment, rentals),
    )


@pytest.fixture
def client(monkeypatch, fake_container):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=fake_container)
    return app.test_client()
