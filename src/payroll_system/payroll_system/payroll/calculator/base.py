from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from ...core.enums import EmployeeType
from ...core.exceptions import InvalidRecord
from ..model import Payroll, Period
from ..policy import DEFAULT_POLICY, PayrollPolicy
from ..repository import EmployeeDirectory, PayrollEmployee

logger = logging.getLogger(__name__)


class PayrollCalculator(ABC):
    """Calculates payroll for every employee of one category (Template Method).

    Runs are all-or-nothing: directory failures and per-employee failures
    propagate to the caller and no partial result is returned.
    """

    def __init__(
        self,
        directory: EmployeeDirectory,
        *,
        policy: Optional[PayrollPolicy] = None,
        max_workers: Optional[int] = None,
    ):
        self._directory = directory
        self._policy = policy or DEFAULT_POLICY
        self._max_workers = int(max_workers or 1)

    @property
    @abstractmethod
    def category(self) -> EmployeeType:
        raise NotImplementedError

    @property
    def policy(self) -> PayrollPolicy:
        return self._policy

    def execute(self, period: Period) -> List[Payroll]:
        employees = list(self._directory.all_employees_of(self.category, period))

        if self._max_workers > 1 and len(employees) > 1:
            with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
                payrolls = list(pool.map(lambda e: self._payroll_of(e, period), employees))
        else:
            payrolls = [self._payroll_of(e, period) for e in employees]

        logger.info("Calculated %d %s payrolls for %s", len(payrolls), self.category.value, period)
        return payrolls

    def _payroll_of(self, employee: PayrollEmployee, period: Period) -> Payroll:
        if getattr(employee, "category", None) is not self.category:
            raise InvalidRecord(f"Directory returned {employee!r} for a {self.category.value} payroll run")
        payroll = employee.payroll(period, self._policy)
        logger.debug("Payroll %s %s: %s", payroll.employee_id, period, payroll.amount)
        return payroll
