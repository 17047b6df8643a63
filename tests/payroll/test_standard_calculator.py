import pytest

from src.rental_admin.rental_admin.payroll.calculator.standard_calculator import StandardPayrollCalculator
from src.rental_admin.rental_admin.payroll.model import AttendanceTally


def test_absent_days_dock_a_full_day_each():
    pay = StandardPayrollCalculator().adjust(26000, AttendanceTally(present=22, absent=2, late=0))

    assert pay.per_day == 1000
    assert pay.deductions == 2000
    assert pay.net_salary == 24000


def test_late_days_dock_a_tenth_of_a_day_each():
    pay = StandardPayrollCalculator().adjust(26000, AttendanceTally(present=24, absent=0, late=3))

    assert pay.late_deduction == pytest.approx(300)
    assert pay.deductions == 300
    assert pay.net_salary == 25700


@pytest.mark.parametrize("salary", [None, 0])
def test_missing_salary_pays_nothing(salary):
    pay = StandardPayrollCalculator().adjust(salary, AttendanceTally(present=3, absent=5, late=2))

    assert pay.deductions == 0
    assert pay.net_salary == 0


def test_combined_deductions_round_to_whole_amount():
    pay = StandardPayrollCalculator().adjust(10000, AttendanceTally(present=20, absent=1, late=1))

    assert pay.per_day == pytest.approx(384.615, abs=1e-3)
    assert pay.late_deduction == pytest.approx(38.46, abs=1e-2)
    assert pay.deductions == 423
    assert pay.net_salary == 9577


def test_net_never_goes_negative():
    pay = StandardPayrollCalculator().adjust(2600, AttendanceTally(absent=40))

    assert pay.deductions == 4000
    assert pay.net_salary == 0


def test_half_deduction_rounds_up():
    # 52 / 26 * 0.25 = 0.5
    pay = StandardPayrollCalculator(late_penalty_fraction=0.25).adjust(52, AttendanceTally(late=1))

    assert pay.deductions == 1


def test_working_days_and_penalty_are_configurable():
    pay = StandardPayrollCalculator(working_days=20, late_penalty_fraction=0.5).adjust(20000, AttendanceTally(late=2))

    assert pay.deductions == 1000


@pytest.mark.parametrize("kwargs", [{"working_days": 0}, {"late_penalty_fraction": 1.5}, {"late_penalty_fraction": -0.1}])
def test_rejects_invalid_configuration(kwargs):
    with pytest.raises(ValueError):
        StandardPayrollCalculator(**kwargs)
