from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from typing import Tuple

from ...common.validators import require_date, require_non_negative_int, require_unique_dates
from ...core.constants import STANDARD_WORK_HOURS
from ...core.enums import EmployeeType, SalaryUnit
from ...core.exceptions import InvalidRecord
from ..model import EmployeeId, Payroll, Period, Salary
from ..policy import DEFAULT_POLICY, PayrollPolicy


@dataclass(frozen=True)
class TimeCard:
    """One day's worked hours for an hourly employee."""

    work_date: date
    work_hours: int

    def __post_init__(self) -> None:
        require_date(self.work_date, "work_date")
        require_non_negative_int(self.work_hours, "work_hours")

    def regular_work_hours(self, standard_hours: int = STANDARD_WORK_HOURS) -> int:
        return min(self.work_hours, standard_hours)

    def overtime_work_hours(self, standard_hours: int = STANDARD_WORK_HOURS) -> int:
        return max(self.work_hours - standard_hours, 0)

    def is_overtime(self, standard_hours: int = STANDARD_WORK_HOURS) -> bool:
        return self.overtime_work_hours(standard_hours) > 0


@dataclass(frozen=True)
class HourlyEmployee:
    """Payroll aggregate for employees paid per worked hour.

    Time cards are owned by the employee and never shared; adding one returns
    a new aggregate.
    """

    employee_id: EmployeeId
    hourly_rate: Salary
    time_cards: Tuple[TimeCard, ...] = field(default_factory=tuple)

    category = EmployeeType.HOURLY

    def __post_init__(self) -> None:
        if self.hourly_rate.unit is not SalaryUnit.HOUR:
            raise InvalidRecord(f"Hourly employee {self.employee_id} needs an hourly rate")
        cards = tuple(self.time_cards)
        require_unique_dates((c.work_date for c in cards), "time card")
        object.__setattr__(self, "time_cards", cards)

    def submit_time_card(self, time_card: TimeCard) -> "HourlyEmployee":
        return replace(self, time_cards=self.time_cards + (time_card,))

    def time_cards_in(self, period: Period) -> Tuple[TimeCard, ...]:
        return tuple(c for c in self.time_cards if period.contains(c.work_date))

    def pay_for(self, time_card: TimeCard, policy: PayrollPolicy = DEFAULT_POLICY) -> Decimal:
        hours = policy.standard_work_hours
        regular_pay = self.hourly_rate.multiply(time_card.regular_work_hours(hours))
        overtime_pay = self.hourly_rate.multiply(time_card.overtime_work_hours(hours)) * policy.overtime_premium
        return regular_pay + overtime_pay

    def payroll(self, period: Period, policy: PayrollPolicy = DEFAULT_POLICY) -> Payroll:
        total = sum((self.pay_for(c, policy) for c in self.time_cards_in(period)), Decimal("0"))
        return Payroll(employee_id=self.employee_id, period=period, amount=policy.round(total))

