from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from ..core.constants import (
    AMOUNT_QUANTUM,
    AMOUNT_ROUNDING,
    DEFAULT_OVERTIME_PREMIUM,
    DEFAULT_WORKING_DAYS_PER_MONTH,
    STANDARD_WORK_HOURS,
)
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class PayrollPolicy:
    """Business constants that payroll rules depend on.

    Only the final per-employee amount is rounded; intermediate products keep
    full Decimal precision.
    """

    standard_work_hours: int = STANDARD_WORK_HOURS
    overtime_premium: Decimal = DEFAULT_OVERTIME_PREMIUM
    working_days_per_month: int = DEFAULT_WORKING_DAYS_PER_MONTH
    amount_quantum: Decimal = AMOUNT_QUANTUM
    rounding: str = AMOUNT_ROUNDING

    def __post_init__(self) -> None:
        object.__setattr__(self, "overtime_premium", Decimal(str(self.overtime_premium)))
        object.__setattr__(self, "amount_quantum", Decimal(str(self.amount_quantum)))

        if int(self.standard_work_hours) <= 0:
            raise ValidationError("standard_work_hours must be positive")
        if int(self.working_days_per_month) <= 0:
            raise ValidationError("working_days_per_month must be positive")
        if self.overtime_premium < 1:
            raise ValidationError("overtime_premium must be at least 1")
        if self.amount_quantum <= 0:
            raise ValidationError("amount_quantum must be positive")

    def round(self, amount: Decimal) -> Decimal:
        return Decimal(amount).quantize(self.amount_quantum, rounding=self.rounding)

    @classmethod
    def from_settings(cls, settings: Any) -> "PayrollPolicy":
        """Build a policy from a settings module, keeping defaults for missing names."""
        return cls(
            standard_work_hours=int(getattr(settings, "STANDARD_WORK_HOURS", STANDARD_WORK_HOURS)),
            overtime_premium=Decimal(str(getattr(settings, "OVERTIME_PREMIUM", DEFAULT_OVERTIME_PREMIUM))),
            working_days_per_month=int(getattr(settings, "WORKING_DAYS_PER_MONTH", DEFAULT_WORKING_DAYS_PER_MONTH)),
        )


DEFAULT_POLICY = PayrollPolicy()
