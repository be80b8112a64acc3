from __future__ import annotations

from ...core.enums import EmployeeType
from .base import PayrollCalculator


class SalariedPayrollCalculator(PayrollCalculator):
    """Monthly rate minus one daily rate per unpaid absence, never below 0."""

    @property
    def category(self) -> EmployeeType:
        return EmployeeType.SALARIED
