from datetime import date
from decimal import Decimal

import pytest

from payroll_system.core.enums import LeaveKind
from payroll_system.core.exceptions import InvalidRecord
from payroll_system.payroll.hourly.model import HourlyEmployee, TimeCard
from payroll_system.payroll.model import EmployeeId, Period, Salary
from payroll_system.payroll.policy import PayrollPolicy
from payroll_system.payroll.salaried.model import Absence, SalariedEmployee

SEPTEMBER = Period.month_of(2019, 9)


def hourly(*cards: TimeCard, rate="100.00") -> HourlyEmployee:
    return HourlyEmployee(EmployeeId.of("emp200109101000001"), Salary.hourly(rate), cards)


def salaried(*absences: Absence, rate="10000.00") -> SalariedEmployee:
    return SalariedEmployee(EmployeeId.of("emp201110101000003"), Salary.monthly(rate), absences)


def test_hourly_regular_day():
    payroll = hourly(TimeCard(date(2019, 9, 2), 8)).payroll(SEPTEMBER)

    assert payroll.amount == Decimal("800.00")
    assert payroll.employee_id == EmployeeId.of("emp200109101000001")
    assert payroll.period == SEPTEMBER


def test_hourly_overtime_is_paid_at_premium():
    payroll = hourly(TimeCard(date(2019, 9, 2), 10)).payroll(SEPTEMBER)

    # 8 x 100 + 2 x 100 x 1.5
    assert payroll.amount == Decimal("1100.00")


def test_hourly_sums_time_cards_in_period():
    employee = hourly(
        TimeCard(date(2019, 9, 2), 8),
        TimeCard(date(2019, 9, 3), 8),
        TimeCard(date(2019, 9, 4), 9),
        TimeCard(date(2019, 9, 5), 10),
        TimeCard(date(2019, 9, 6), 8),
    )

    # 5 x 800 + 150 + 300
    assert employee.payroll(SEPTEMBER).amount == Decimal("4450.00")


def test_hourly_ignores_time_cards_outside_period():
    inside = hourly(TimeCard(date(2019, 9, 30), 8))
    with_outside = hourly(
        TimeCard(date(2019, 8, 31), 12),
        TimeCard(date(2019, 9, 30), 8),
        TimeCard(date(2019, 10, 1), 12),
    )

    assert with_outside.payroll(SEPTEMBER).amount == inside.payroll(SEPTEMBER).amount == Decimal("800.00")


def test_hourly_without_time_cards_is_zero():
    assert hourly().payroll(SEPTEMBER).amount == Decimal("0.00")
    assert hourly(TimeCard(date(2019, 10, 1), 8)).payroll(SEPTEMBER).amount == Decimal("0.00")


def test_hourly_payroll_is_idempotent():
    employee = hourly(TimeCard(date(2019, 9, 2), 11))

    assert employee.payroll(SEPTEMBER) == employee.payroll(SEPTEMBER)


def test_hourly_uses_policy_premium_and_standard_day():
    policy = PayrollPolicy(standard_work_hours=7, overtime_premium=Decimal("2"))
    employee = hourly(TimeCard(date(2019, 9, 2), 9))

    # 7 x 100 + 2 x 100 x 2
    assert employee.payroll(SEPTEMBER, policy).amount == Decimal("1100.00")


def test_hourly_rounds_final_amount_half_up():
    employee = hourly(TimeCard(date(2019, 9, 2), 9), rate="10.005")

    # 8 x 10.005 + 1 x 10.005 x 1.5 = 95.0475
    assert employee.payroll(SEPTEMBER).amount == Decimal("95.05")


def test_hourly_rejects_duplicate_time_card_dates():
    with pytest.raises(InvalidRecord):
        hourly(TimeCard(date(2019, 9, 2), 8), TimeCard(date(2019, 9, 2), 4))


def test_submit_time_card_returns_new_aggregate():
    employee = hourly(TimeCard(date(2019, 9, 2), 8))
    updated = employee.submit_time_card(TimeCard(date(2019, 9, 3), 8))

    assert len(employee.time_cards) == 1
    assert len(updated.time_cards) == 2
    assert updated.payroll(SEPTEMBER).amount == Decimal("1600.00")

    with pytest.raises(InvalidRecord):
        updated.submit_time_card(TimeCard(date(2019, 9, 3), 2))


def test_hourly_employee_requires_hourly_rate():
    with pytest.raises(InvalidRecord):
        HourlyEmployee(EmployeeId.of("emp1"), Salary.monthly(100))


def test_salaried_without_absences_gets_full_month():
    assert salaried().payroll(SEPTEMBER).amount == Decimal("10000.00")


def test_salaried_unpaid_absence_deducts_daily_rate():
    payroll = salaried(Absence(date(2019, 9, 2), LeaveKind.UNPAID_LEAVE)).payroll(SEPTEMBER)

    # 10000 - 10000 / 22 = 9545.4545... rounded half up
    assert payroll.amount == Decimal("9545.45")


def test_salaried_paid_absence_is_not_deducted():
    employee = salaried(
        Absence(date(2019, 9, 3), LeaveKind.PAID_LEAVE),
        Absence(date(2019, 9, 4), LeaveKind.PAID_LEAVE),
    )

    assert employee.payroll(SEPTEMBER).amount == Decimal("10000.00")


def test_salaried_deductions_are_rounded_once():
    employee = salaried(
        Absence(date(2019, 9, 2), LeaveKind.UNPAID_LEAVE),
        Absence(date(2019, 9, 3), LeaveKind.PAID_LEAVE),
        Absence(date(2019, 9, 4), LeaveKind.UNPAID_LEAVE),
        Absence(date(2019, 10, 8), LeaveKind.UNPAID_LEAVE),
    )

    # 10000 - 2 x 10000 / 22 = 9090.9090...
    assert employee.payroll(SEPTEMBER).amount == Decimal("9090.91")


def test_salaried_pay_never_goes_negative():
    absences = [Absence(date(2019, 9, d), LeaveKind.UNPAID_LEAVE) for d in range(1, 31)]

    assert salaried(*absences).payroll(SEPTEMBER).amount == Decimal("0.00")


def test_salaried_uses_policy_working_days():
    policy = PayrollPolicy(working_days_per_month=20)
    employee = salaried(Absence(date(2019, 9, 2), LeaveKind.UNPAID_LEAVE))

    assert employee.payroll(SEPTEMBER, policy).amount == Decimal("9500.00")


def test_record_absence_returns_new_aggregate():
    employee = salaried()
    updated = employee.record_absence(Absence(date(2019, 9, 2), LeaveKind.UNPAID_LEAVE))

    assert employee.absences == ()
    assert updated.payroll(SEPTEMBER).amount == Decimal("9545.45")

    with pytest.raises(InvalidRecord):
        updated.record_absence(Absence(date(2019, 9, 2), LeaveKind.PAID_LEAVE))


def test_salaried_employee_requires_monthly_rate():
    with pytest.raises(InvalidRecord):
        SalariedEmployee(EmployeeId.of("emp1"), Salary.hourly(100))
