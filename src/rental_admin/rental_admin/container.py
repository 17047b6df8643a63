from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from .attendance.factory import AttendanceStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import (
    DEFAULT_LATE_GRACE_MINUTES,
    DEFAULT_LATE_PENALTY_FRACTION,
    DEFAULT_OFFICE_START,
    DEFAULT_WORKING_DAYS_PER_MONTH,
)
from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.service import EmployeeService
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.service import LeaveService
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.service import PayrollService
from .payroll.tracker import PayrollRunTracker
from .rentals.mysql_rental_repository import MySQLEquipmentRepository, MySQLRentalRepository
from .rentals.service import InventoryService, RentalService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    attendance_repo: MySQLAttendanceRepository
    leaves_repo: MySQLLeaveRepository
    equipment_repo: MySQLEquipmentRepository
    rentals_repo: MySQLRentalRepository

    employee_service: EmployeeService
    attendance_service: AttendanceService
    leave_service: LeaveService
    payroll_service: PayrollService
    inventory_service: InventoryService
    rental_service: RentalService
    dashboard_service: DashboardService


def build_container(
    *,
    db_config: dict,
    working_days: int = DEFAULT_WORKING_DAYS_PER_MONTH,
    late_penalty_fraction: float = DEFAULT_LATE_PENALTY_FRACTION,
    office_start: time = DEFAULT_OFFICE_START,
    grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    leaves_repo = MySQLLeaveRepository(conn)
    equipment_repo = MySQLEquipmentRepository(conn)
    rentals_repo = MySQLRentalRepository(conn)

    employee_service = EmployeeService(employees_repo, attendance_repo)
    attendance_service = AttendanceService(
        attendance_repo,
        employees_repo,
        strategy_factory=AttendanceStrategyFactory(),
        office_start=office_start,
        grace_minutes=grace_minutes,
    )
    leave_service = LeaveService(leaves_repo, employees_repo)
    payroll_service = PayrollService(
        employees_repo,
        attendance_repo,
        leaves_repo,
        calculator=StandardPayrollCalculator(working_days=working_days, late_penalty_fraction=late_penalty_fraction),
        tracker=PayrollRunTracker(),
    )
    inventory_service = InventoryService(equipment_repo)
    rental_service = RentalService(rentals_repo, equipment_repo)
    dashboard_service = DashboardService(employees_repo, attendance_repo, leaves_repo, equipment_repo, rentals_repo)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        equipment_repo=equipment_repo,
        rentals_repo=rentals_repo,
        employee_service=employee_service,
        attendance_service=attendance_service,
        leave_service=leave_service,
        payroll_service=payroll_service,
        inventory_service=inventory_service,
        rental_service=rental_service,
        dashboard_service=dashboard_service,
    )
