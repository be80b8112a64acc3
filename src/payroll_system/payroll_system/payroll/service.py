from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from ..core.enums import EmployeeType
from .calculator.base import PayrollCalculator
from .model import Payroll, Period

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PayrollRun:
    period: Period
    payrolls: Dict[EmployeeType, List[Payroll]]

    @property
    def total(self) -> Decimal:
        return sum((p.amount for items in self.payrolls.values() for p in items), Decimal("0"))

    def count(self) -> int:
        return sum(len(items) for items in self.payrolls.values())

    def to_dict(self) -> dict:
        return {
            "period_start": self.period.start.isoformat(),
            "period_end": self.period.end.isoformat(),
            "payrolls": {
                category.value: [p.to_dict() for p in items]
                for category, items in self.payrolls.items()
            },
            "count": self.count(),
            "total": str(self.total),
        }


class PayrollRunService:
    """Runs the per-category calculators for one settlement period."""

    def __init__(self, calculators: Iterable[PayrollCalculator]):
        self._calculators: Dict[EmployeeType, PayrollCalculator] = {}
        for calc in calculators:
            self._calculators[calc.category] = calc

    @property
    def categories(self) -> List[EmployeeType]:
        return list(self._calculators)

    def calculator_for(self, category: EmployeeType) -> PayrollCalculator:
        calc = self._calculators.get(category)
        if calc is None:
            raise KeyError(f"No payroll calculator registered for {category.value}")
        return calc

    def run(self, period: Period, categories: Optional[Iterable[EmployeeType]] = None) -> PayrollRun:
        selected = list(categories) if categories is not None else self.categories

        payrolls: Dict[EmployeeType, List[Payroll]] = {}
        for category in selected:
            payrolls[category] = self.calculator_for(category).execute(period)

        run = PayrollRun(period=period, payrolls=payrolls)
        logger.info("Payroll run %s: %d payrolls, total %s", period, run.count(), run.total)
        return run
