from datetime import date, datetime

import pytest

from src.rental_admin.rental_admin.core.enums import LeaveStatus, LeaveType
from src.rental_admin.rental_admin.core.exceptions import NotFoundError, ValidationError
from src.rental_admin.rental_admin.leaves.service import LeaveService

from tests.fakes import FakeEmployeesRepo, FakeLeavesRepo, make_employee


def _service():
    repo = FakeLeavesRepo()
    return LeaveService(repo, FakeEmployeesRepo([make_employee(1, "Asha")])), repo


def test_apply_counts_days_inclusively():
    svc, repo = _service()

    leave_id = svc.apply_leave(
        employee_id=1,
        leave_type="Sick",
        from_date=date(2025, 3, 10),
        to_date=date(2025, 3, 12),
        reason=" fever ",
        now=datetime(2025, 3, 9, 18, 0),
    )

    leave = repo.get_by_id(leave_id)
    assert leave.days == 3
    assert leave.leave_type == LeaveType.SICK
    assert leave.status == LeaveStatus.PENDING
    assert leave.reason == "fever"


def test_single_day_leave_is_one_day():
    svc, repo = _service()

    leave_id = svc.apply_leave(employee_id=1, leave_type="casual", from_date=date(2025, 3, 10), to_date=date(2025, 3, 10))

    assert repo.get_by_id(leave_id).days == 1


def test_apply_rejects_reversed_range_and_unknown_type():
    svc, _ = _service()

    with pytest.raises(ValidationError):
        svc.apply_leave(employee_id=1, leave_type="casual", from_date=date(2025, 3, 12), to_date=date(2025, 3, 10))
    with pytest.raises(ValidationError):
        svc.apply_leave(employee_id=1, leave_type="sabbatical", from_date=date(2025, 3, 10), to_date=date(2025, 3, 10))
    with pytest.raises(NotFoundError):
        svc.apply_leave(employee_id=7, leave_type="casual", from_date=date(2025, 3, 10), to_date=date(2025, 3, 10))


def test_approve_then_decide_again_fails():
    svc, _ = _service()
    leave_id = svc.apply_leave(employee_id=1, leave_type="annual", from_date=date(2025, 3, 10), to_date=date(2025, 3, 11))

    assert svc.approve_leave(leave_id).status == LeaveStatus.APPROVED
    with pytest.raises(ValidationError):
        svc.reject_leave(leave_id)


def test_reject_and_listing():
    svc, _ = _service()
    first = svc.apply_leave(employee_id=1, leave_type="casual", from_date=date(2025, 3, 1), to_date=date(2025, 3, 1))
    svc.apply_leave(employee_id=1, leave_type="casual", from_date=date(2025, 3, 5), to_date=date(2025, 3, 5))

    svc.reject_leave(first)

    assert len(svc.list_leaves(employee_id=1)) == 2
    assert [lv.status for lv in svc.list_leaves(employee_id=1)].count(LeaveStatus.REJECTED) == 1
    with pytest.raises(NotFoundError):
        svc.approve_leave(999)
