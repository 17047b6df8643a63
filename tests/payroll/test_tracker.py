from src.rental_admin.rental_admin.common.datetime_utils import Month
from src.rental_admin.rental_admin.payroll.model import PayrollReport, PayrollSummary
from src.rental_admin.rental_admin.payroll.tracker import PayrollRunTracker


def _report(month):
    return PayrollReport(month=month, rows=(), summary=PayrollSummary(0, 0, 0))


def test_latest_run_wins():
    tracker = PayrollRunTracker()
    march = tracker.begin(Month(2025, 3))
    april = tracker.begin(Month(2025, 4))

    assert tracker.complete(april, _report(april.month))
    assert not tracker.complete(march, _report(march.month))
    assert tracker.latest.month == Month(2025, 4)


def test_nothing_before_first_run():
    assert PayrollRunTracker().latest is None
