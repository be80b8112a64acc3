from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from typing import Optional, Tuple

from ...common.validators import require_date, require_unique_dates
from ...core.enums import EmployeeType, LeaveKind, SalaryUnit
from ...core.exceptions import InvalidRecord
from ..model import EmployeeId, Payroll, Period, Salary
from ..policy import DEFAULT_POLICY, PayrollPolicy


@dataclass(frozen=True)
class Absence:
    """One day's non-work event for a salaried employee."""

    leave_date: date
    kind: LeaveKind
    reason: Optional[str] = None

    def __post_init__(self) -> None:
        require_date(self.leave_date, "leave_date")
        try:
            object.__setattr__(self, "kind", LeaveKind(self.kind))
        except ValueError as exc:
            raise InvalidRecord(f"Unknown leave kind {self.kind!r}") from exc

    def is_paid_leave(self) -> bool:
        return self.kind is LeaveKind.PAID_LEAVE


@dataclass(frozen=True)
class SalariedEmployee:
    """Payroll aggregate for employees paid a fixed monthly amount.

    The period is assumed to cover one month: the full monthly rate is the
    starting point, reduced by one daily rate per unpaid absence in the period.
    """

    employee_id: EmployeeId
    monthly_rate: Salary
    absences: Tuple[Absence, ...] = field(default_factory=tuple)

    category = EmployeeType.SALARIED

    def __post_init__(self) -> None:
        if self.monthly_rate.unit is not SalaryUnit.MONTH:
            raise InvalidRecord(f"Salaried employee {self.employee_id} needs a monthly rate")
        absences = tuple(self.absences)
        require_unique_dates((a.leave_date for a in absences), "absence")
        object.__setattr__(self, "absences", absences)

    def record_absence(self, absence: Absence) -> "SalariedEmployee":
        return replace(self, absences=self.absences + (absence,))

    def unpaid_absences_in(self, period: Period) -> Tuple[Absence, ...]:
        return tuple(a for a in self.absences if period.contains(a.leave_date) and not a.is_paid_leave())

    def payroll(self, period: Period, policy: PayrollPolicy = DEFAULT_POLICY) -> Payroll:
        unpaid_days = len(self.unpaid_absences_in(period))
        deduction = self.monthly_rate.daily_rate(policy.working_days_per_month) * unpaid_days
        amount = max(self.monthly_rate.amount - deduction, Decimal("0"))
        return Payroll(employee_id=self.employee_id, period=period, amount=policy.round(amount))
