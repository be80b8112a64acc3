from __future__ import annotations

from typing import Protocol, Sequence, Union

from ..core.enums import EmployeeType
from .hourly.model import HourlyEmployee
from .model import Period
from .salaried.model import SalariedEmployee

PayrollEmployee = Union[HourlyEmployee, SalariedEmployee]


class EmployeeDirectory(Protocol):
    """Source of employees eligible for a payroll run.

    Implementations return employees with their time cards or absences for
    ``period`` already attached, and raise ``DirectoryUnavailable`` when the
    backing store cannot be queried.
    """

    def all_employees_of(self, category: EmployeeType, period: Period) -> Sequence[PayrollEmployee]:
        raise NotImplementedError
