from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import EmployeeType
from ..payroll.model import EmployeeId
from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for directory records.

    Note (DIP): services depend on this interface, not on a concrete DB.
    """

    def get_by_id(self, employee_id: EmployeeId) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def list_by_type(self, employee_type: EmployeeType) -> Sequence[Employee]:
        raise NotImplementedError

    def save(self, employee: Employee) -> None:
        raise NotImplementedError

    def delete(self, employee_id: EmployeeId) -> bool:
        raise NotImplementedError
