from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Union

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_date, require_non_empty
from ..core.enums import SalaryUnit
from ..core.exceptions import InvalidPeriod, InvalidRecord

Number = Union[int, float, str, Decimal]


@dataclass(frozen=True)
class EmployeeId:
    """Identifier assigned by the employee directory (e.g. ``emp200109101000001``)."""

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", require_non_empty(self.value, "employee_id", error=InvalidRecord))

    @classmethod
    def of(cls, value: str) -> "EmployeeId":
        return cls(value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Period:
    """Settlement window, inclusive on both ends."""

    start: date
    end: date

    def __post_init__(self) -> None:
        require_date(self.start, "period start", error=InvalidPeriod)
        require_date(self.end, "period end", error=InvalidPeriod)
        if self.start > self.end:
            raise InvalidPeriod(f"Period start {self.start} is after end {self.end}")

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def __contains__(self, day: date) -> bool:
        return self.contains(day)

    @classmethod
    def month_of(cls, year: int, month: int) -> "Period":
        try:
            last_day = calendar.monthrange(year, month)[1]
        except (calendar.IllegalMonthError, ValueError) as exc:
            raise InvalidPeriod(f"Invalid month {year}-{month}") from exc
        return cls(date(year, month, 1), date(year, month, last_day))

    @classmethod
    def parse(cls, start: str, end: str) -> "Period":
        try:
            return cls(parse_iso_date(start), parse_iso_date(end))
        except (TypeError, ValueError) as exc:
            raise InvalidPeriod(f"Invalid period {start!r}..{end!r}, expected YYYY-MM-DD") from exc

    def __str__(self) -> str:
        return f"{self.start.isoformat()}..{self.end.isoformat()}"


@dataclass(frozen=True)
class Salary:
    """Monetary rate; equal when the numeric amounts are equal."""

    amount: Decimal
    unit: SalaryUnit = field(default=SalaryUnit.HOUR, compare=False)

    def __post_init__(self) -> None:
        amount = _to_decimal(self.amount)
        if not amount.is_finite() or amount < 0:
            raise InvalidRecord(f"Salary must be a non-negative amount, got {amount}")
        object.__setattr__(self, "amount", amount)
        object.__setattr__(self, "unit", SalaryUnit(self.unit))

    @classmethod
    def of(cls, amount: Number, unit: SalaryUnit = SalaryUnit.HOUR) -> "Salary":
        return cls(_to_decimal(amount), unit)

    @classmethod
    def hourly(cls, amount: Number) -> "Salary":
        return cls.of(amount, SalaryUnit.HOUR)

    @classmethod
    def monthly(cls, amount: Number) -> "Salary":
        return cls.of(amount, SalaryUnit.MONTH)

    def multiply(self, hours: Union[int, Decimal]) -> Decimal:
        return self.amount * hours

    def daily_rate(self, working_days: int) -> Decimal:
        if self.unit is not SalaryUnit.MONTH:
            raise InvalidRecord("daily_rate is only defined for monthly salaries")
        if working_days <= 0:
            raise InvalidRecord(f"working_days must be positive, got {working_days}")
        return self.amount / Decimal(working_days)


@dataclass(frozen=True)
class Payroll:
    """Result of one payroll calculation for one employee and period."""

    employee_id: EmployeeId
    period: Period
    amount: Decimal

    def to_dict(self) -> dict:
        return {
            "employee_id": str(self.employee_id),
            "period_start": self.period.start.isoformat(),
            "period_end": self.period.end.isoformat(),
            "amount": str(self.amount),
        }


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, bool):
        raise InvalidRecord(f"Invalid amount {value!r}")
    if isinstance(value, Decimal):
        return value
    try:
        # floats go through str so 100.1 stays 100.1 instead of its binary expansion
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise InvalidRecord(f"Invalid amount {value!r}") from exc
