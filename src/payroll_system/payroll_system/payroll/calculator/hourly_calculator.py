from __future__ import annotations

from ...core.enums import EmployeeType
from .base import PayrollCalculator


class HourlyPayrollCalculator(PayrollCalculator):
    """Regular hours at the hourly rate, overtime at rate x premium."""

    @property
    def category(self) -> EmployeeType:
        return EmployeeType.HOURLY
