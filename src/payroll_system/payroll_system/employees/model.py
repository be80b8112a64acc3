from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.validators import require_date, require_non_empty
from ..core.enums import EmployeeType, Gender
from ..core.exceptions import ValidationError
from ..payroll.model import EmployeeId

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class Email:
    value: str

    def __post_init__(self) -> None:
        value = require_non_empty(self.value, "email")
        if not _EMAIL_RE.match(value):
            raise ValidationError(f"Invalid email {value!r}")
        object.__setattr__(self, "value", value)

    @classmethod
    def of(cls, value: str) -> "Email":
        return cls(value)


@dataclass(frozen=True)
class Address:
    country: str
    province: str
    city: str
    street: str
    zip_code: str


@dataclass(frozen=True)
class Contact:
    cell_phone: str
    home_phone: Optional[str] = None

    @classmethod
    def of(cls, cell_phone: str, home_phone: Optional[str] = None) -> "Contact":
        return cls(cell_phone=require_non_empty(cell_phone, "cell_phone"), home_phone=home_phone or None)


@dataclass(frozen=True)
class Employee:
    """Directory record of an employee.

    Note: Plain data object (no DB access). Payroll rules live in the
    ``payroll`` aggregates, which only need the id and the salary.
    """

    employee_id: EmployeeId
    name: str
    email: Email
    employee_type: EmployeeType
    gender: Gender
    salary: Decimal
    boarding_date: date
    address: Optional[Address] = None
    contact: Optional[Contact] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", require_non_empty(self.name, "name"))
        require_date(self.boarding_date, "boarding_date", error=ValidationError)

    def is_hourly(self) -> bool:
        return self.employee_type is EmployeeType.HOURLY

    def is_salaried(self) -> bool:
        return self.employee_type is EmployeeType.SALARIED

    def is_male(self) -> bool:
        return self.gender is Gender.MALE
