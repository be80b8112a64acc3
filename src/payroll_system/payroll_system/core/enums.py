from __future__ import annotations

from enum import Enum


class EmployeeType(str, Enum):
    """Compensation scheme; decides which payroll rules apply."""

    HOURLY = "hourly"
    SALARIED = "salaried"


class SalaryUnit(str, Enum):
    HOUR = "hour"
    MONTH = "month"


class LeaveKind(str, Enum):
    """Kind of absence recorded for a salaried employee."""

    PAID_LEAVE = "PAID_LEAVE"
    UNPAID_LEAVE = "UNPAID_LEAVE"


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
