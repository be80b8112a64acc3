from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.enums import EmployeeType
from ..core.exceptions import ValidationError
from ..payroll.model import EmployeeId
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def get(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(EmployeeId.of(employee_id))
        if not employee:
            raise ValidationError(f"Employee {employee_id} does not exist")
        return employee

    def list(self, employee_type: Optional[EmployeeType] = None) -> Sequence[Employee]:
        if employee_type is None:
            return self._employees.list_all()
        return self._employees.list_by_type(employee_type)

    def register(self, employee: Employee) -> None:
        if self._employees.get_by_id(employee.employee_id):
            raise ValidationError(f"Employee {employee.employee_id} already exists")
        self._employees.save(employee)
        logger.info("Registered %s employee %s", employee.employee_type.value, employee.employee_id)

    def remove(self, employee_id: str) -> None:
        if not self._employees.delete(EmployeeId.of(employee_id)):
            raise ValidationError(f"Employee {employee_id} does not exist")
        logger.info("Removed employee %s", employee_id)

    @staticmethod
    def to_dict(employee: Employee) -> dict:
        return {
            "employee_id": str(employee.employee_id),
            "name": employee.name,
            "email": employee.email.value,
            "employee_type": employee.employee_type.value,
            "gender": employee.gender.value,
            "salary": str(employee.salary),
            "boarding_date": employee.boarding_date.isoformat(),
            "address": vars(employee.address) if employee.address else None,
            "contact": vars(employee.contact) if employee.contact else None,
        }
