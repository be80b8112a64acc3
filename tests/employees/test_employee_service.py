from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

import pytest

from payroll_system.container import build_services
from payroll_system.core.enums import EmployeeType, Gender
from payroll_system.core.exceptions import ValidationError
from payroll_system.employees.model import Address, Contact, Email, Employee
from payroll_system.employees.service import EmployeeService
from payroll_system.main import create_app
from payroll_system.payroll.model import EmployeeId


class InMemoryEmployees:
    def __init__(self, *employees: Employee):
        self._by_id: dict[EmployeeId, Employee] = {e.employee_id: e for e in employees}

    def get_by_id(self, employee_id: EmployeeId) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def list_all(self):
        return sorted(self._by_id.values(), key=lambda e: e.employee_id.value)

    def list_by_type(self, employee_type: EmployeeType):
        return [e for e in self.list_all() if e.employee_type is employee_type]

    def save(self, employee: Employee) -> None:
        self._by_id[employee.employee_id] = employee

    def delete(self, employee_id: EmployeeId) -> bool:
        return self._by_id.pop(employee_id, None) is not None


class NoDirectory:
    def all_employees_of(self, category, period):
        return []


def employee_of(emp_id: str, name: str, email: str, employee_type: EmployeeType) -> Employee:
    return Employee(
        employee_id=EmployeeId.of(emp_id),
        name=name,
        email=Email.of(email),
        employee_type=employee_type,
        gender=Gender.MALE,
        salary=Decimal("100.00"),
        boarding_date=date(2001, 9, 10),
        address=Address("China", "SiChuan", "chengdu", "qingyang avenue", "600000"),
        contact=Contact.of("15028150000"),
    )


BRUCE = employee_of("emp200109101000001", "Bruce", "bruce@payroll.com", EmployeeType.HOURLY)
MARY = employee_of("emp201110101000003", "Mary", "mary@payroll.com", EmployeeType.SALARIED)


def test_employee_value_objects():
    assert BRUCE.is_hourly() and not BRUCE.is_salaried()
    assert BRUCE.is_male()
    assert BRUCE.address == Address("China", "SiChuan", "chengdu", "qingyang avenue", "600000")
    assert BRUCE.contact == Contact.of("15028150000")
    assert BRUCE.contact.home_phone is None


def test_email_and_name_are_validated():
    with pytest.raises(ValidationError):
        Email.of("not-an-email")
    with pytest.raises(ValidationError):
        employee_of("emp1", " ", "a@b.com", EmployeeType.HOURLY)


def test_get_and_list():
    svc = EmployeeService(InMemoryEmployees(BRUCE, MARY))

    assert svc.get("emp200109101000001").name == "Bruce"
    assert len(svc.list()) == 2
    assert [e.name for e in svc.list(EmployeeType.HOURLY)] == ["Bruce"]

    with pytest.raises(ValidationError):
        svc.get("emp404")


def test_register_then_remove():
    repo = InMemoryEmployees(BRUCE)
    svc = EmployeeService(repo)
    new_hire = employee_of("emp200109101000099", "test", "test@payroll.com", EmployeeType.HOURLY)

    svc.register(new_hire)
    assert repo.get_by_id(EmployeeId.of("emp200109101000099")) == new_hire

    with pytest.raises(ValidationError):
        svc.register(new_hire)

    svc.remove("emp200109101000099")
    assert repo.get_by_id(EmployeeId.of("emp200109101000099")) is None

    with pytest.raises(ValidationError):
        svc.remove("emp200109101000099")


def test_employees_api(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    container = build_services(employees_repo=InMemoryEmployees(BRUCE, MARY), directory=NoDirectory())
    client = create_app(container).test_client()

    listed = client.get("/api/employees?type=salaried").get_json()
    assert [e["name"] for e in listed] == ["Mary"]

    detail = client.get("/api/employees/emp200109101000001").get_json()
    assert detail["email"] == "bruce@payroll.com"
    assert detail["address"]["city"] == "chengdu"
    assert detail["salary"] == "100.00"

    assert client.get("/api/employees/emp404").status_code == 404
    assert client.get("/api/employees?type=intern").status_code == 400
