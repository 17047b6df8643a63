from datetime import date, datetime

from src.rental_admin.rental_admin.core.enums import AttendanceStatus, EmployeeStatus, EquipmentStatus, LeaveStatus, RentalStatus
from src.rental_admin.rental_admin.dashboard.service import DashboardService

from tests.fakes import (
    FakeAttendanceRepo,
    FakeEmployeesRepo,
    FakeEquipmentRepo,
    FakeLeavesRepo,
    FakeRentalsRepo,
    make_employee,
    make_equipment,
    make_leave,
    record,
)

TODAY = date(2025, 3, 12)


def _service(leaves=(), equipment=(), rentals=None):
    employees = FakeEmployeesRepo(
        [make_employee(1, "Asha"), make_employee(2, "Ravi"), make_employee(3, "Old", status=EmployeeStatus.INACTIVE)]
    )
    attendance = FakeAttendanceRepo(
        [
            record(1, TODAY, AttendanceStatus.LATE),
            record(2, TODAY, AttendanceStatus.ABSENT),
            record(2, date(2025, 3, 11), AttendanceStatus.PRESENT),
        ]
    )
    return DashboardService(employees, attendance, FakeLeavesRepo(leaves), FakeEquipmentRepo(equipment), rentals or FakeRentalsRepo())


def test_staff_counters():
    snap = _service().snapshot(TODAY)

    assert snap.active_employees == 2
    assert snap.present_today == 1
    assert snap.as_of == TODAY


def test_leave_counters_and_recent_list():
    leaves = [
        make_leave(1, 1, date(2025, 3, 10), date(2025, 3, 12), applied_at=datetime(2025, 3, 1, 9, 0)),
        make_leave(2, 2, date(2025, 3, 13), date(2025, 3, 14), applied_at=datetime(2025, 3, 2, 9, 0)),
        make_leave(3, 2, date(2025, 3, 12), date(2025, 3, 12), status=LeaveStatus.PENDING, applied_at=datetime(2025, 3, 3, 9, 0)),
    ] + [
        make_leave(10 + i, 1, date(2025, 1, 1), date(2025, 1, 1), status=LeaveStatus.REJECTED, applied_at=datetime(2025, 2, 1 + i, 9, 0))
        for i in range(5)
    ]

    snap = _service(leaves=leaves).snapshot(TODAY)

    assert snap.on_leave_today == 1
    assert snap.pending_leaves == 1
    assert [lv.leave_id for lv in snap.recent_leaves] == [3, 2, 1, 14, 13]


def test_fleet_counters():
    equipment = [
        make_equipment(1, status=EquipmentStatus.AVAILABLE),
        make_equipment(2, status=EquipmentStatus.RENTED),
        make_equipment(3, status=EquipmentStatus.MAINTENANCE),
    ]
    rentals = FakeRentalsRepo()
    first = rentals.create_rental(
        customer_name="A", customer_phone="1", start_date=TODAY, end_date=TODAY, equipment_ids=[2], total_amount=1, created_at=None
    )
    rentals.create_rental(
        customer_name="B", customer_phone="2", start_date=TODAY, end_date=TODAY, equipment_ids=[1], total_amount=1, created_at=None
    )
    rentals.complete_rental(first, returned_at=datetime(2025, 3, 12, 18, 0))

    snap = _service(equipment=equipment, rentals=rentals).snapshot(TODAY)

    assert snap.total_equipment == 3
    assert snap.available_equipment == 2
    assert snap.equipment_in_maintenance == 1
    assert snap.active_rentals == 1
    assert rentals.get_by_id(first).status == RentalStatus.COMPLETED
