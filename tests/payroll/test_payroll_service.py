import threading
from datetime import date

import pytest

from src.rental_admin.rental_admin.common.datetime_utils import Month
from src.rental_admin.rental_admin.core.enums import AttendanceStatus, EmployeeStatus, LeaveStatus
from src.rental_admin.rental_admin.core.exceptions import DataFetchError, ValidationError
from src.rental_admin.rental_admin.payroll.service import PayrollService
from src.rental_admin.rental_admin.payroll.tracker import PayrollRunTracker

from tests.fakes import FakeAttendanceRepo, FakeEmployeesRepo, FakeLeavesRepo, make_employee, make_leave, record


def _service(attendance=(), leaves=(), employees=None):
    employees = employees if employees is not None else [make_employee(1, "Asha"), make_employee(2, "Ravi")]
    attendance_repo = FakeAttendanceRepo(attendance)
    leaves_repo = FakeLeavesRepo(leaves)
    svc = PayrollService(FakeEmployeesRepo(employees), attendance_repo, leaves_repo)
    return svc, attendance_repo, leaves_repo


def test_report_queries_exact_calendar_month():
    svc, attendance_repo, _ = _service()

    svc.build_report("2024-02")

    assert attendance_repo.list_between_calls == [(date(2024, 2, 1), date(2024, 2, 29))]


def test_report_reads_approved_leave_without_limit():
    svc, _, leaves_repo = _service()

    svc.build_report("2025-03")

    assert leaves_repo.list_calls == [{"employee_id": None, "status": LeaveStatus.APPROVED, "limit": None}]


def test_report_rows_and_summary():
    svc, _, _ = _service(
        attendance=[record(1, date(2025, 3, 3), AttendanceStatus.ABSENT), record(2, date(2025, 3, 3), AttendanceStatus.LATE)],
        leaves=[make_leave(1, 2, date(2025, 3, 10), date(2025, 3, 11))],
    )

    report = svc.build_report("2025-03")

    by_id = {r.employee.employee_id: r for r in report.rows}
    assert by_id[1].net_salary == 25000
    assert by_id[2].net_salary == 25900
    assert by_id[2].leave_days == 2
    assert report.summary.total_payroll == 50900
    assert report.summary.average_net_pay == 25450


def test_inactive_employees_are_left_out():
    svc, _, _ = _service(employees=[make_employee(1), make_employee(2, "Old", status=EmployeeStatus.INACTIVE)])

    report = svc.build_report(Month(2025, 3))

    assert [r.employee.employee_id for r in report.rows] == [1]


def test_bad_month_is_rejected():
    svc, _, _ = _service()

    with pytest.raises(ValidationError):
        svc.build_report("2025-13")


def test_failed_source_fails_whole_report():
    class BrokenAttendance(FakeAttendanceRepo):
        def list_between(self, *, start_date, end_date):
            raise PermissionError("denied")

    svc = PayrollService(FakeEmployeesRepo([make_employee(1)]), BrokenAttendance(), FakeLeavesRepo())

    with pytest.raises(DataFetchError):
        svc.build_report("2025-03")


def test_sources_are_read_concurrently():
    barrier = threading.Barrier(3, timeout=5)

    class WaitingEmployees(FakeEmployeesRepo):
        def list_active(self):
            barrier.wait()
            return super().list_active()

    class WaitingAttendance(FakeAttendanceRepo):
        def list_between(self, *, start_date, end_date):
            barrier.wait()
            return super().list_between(start_date=start_date, end_date=end_date)

    class WaitingLeaves(FakeLeavesRepo):
        def list_leaves(self, **kw):
            barrier.wait()
            return super().list_leaves(**kw)

    svc = PayrollService(WaitingEmployees([make_employee(1)]), WaitingAttendance(), WaitingLeaves())

    assert svc.build_report("2025-03").summary.employee_count == 1


def test_refresh_keeps_latest_report():
    svc, _, _ = _service()

    report = svc.refresh("2025-03")

    assert report.run_seq == 1
    assert svc.latest() is report


def test_superseded_refresh_is_dropped():
    tracker = PayrollRunTracker()
    started = threading.Event()
    release = threading.Event()

    class SlowEmployees(FakeEmployeesRepo):
        def list_active(self):
            if not started.is_set():
                started.set()
                release.wait(5)
            return super().list_active()

    svc = PayrollService(SlowEmployees([make_employee(1)]), FakeAttendanceRepo(), FakeLeavesRepo(), tracker=tracker)

    results = {}
    slow = threading.Thread(target=lambda: results.setdefault("march", svc.refresh("2025-03")))
    slow.start()
    started.wait(5)

    april = svc.refresh("2025-04")
    release.set()
    slow.join(5)

    assert results["march"] is None
    assert str(svc.latest().month) == "2025-04"
    assert svc.latest() is april
