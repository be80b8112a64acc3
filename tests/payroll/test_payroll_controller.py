from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

import pytest

from payroll_system.container import build_services
from payroll_system.core.enums import EmployeeType
from payroll_system.core.exceptions import DirectoryUnavailable
from payroll_system.main import create_app
from payroll_system.payroll.hourly.model import HourlyEmployee, TimeCard
from payroll_system.payroll.model import EmployeeId, Salary


@dataclass
class InMemoryDirectory:
    employees: dict = field(default_factory=dict)

    def all_employees_of(self, category, period):
        return list(self.employees.get(category, []))


class FailingDirectory:
    def all_employees_of(self, category, period):
        raise DirectoryUnavailable("db is down")


class EmptyEmployees:
    def get_by_id(self, employee_id):
        return None

    def list_all(self):
        return []

    def list_by_type(self, employee_type):
        return []


def client_for(directory):
    container = build_services(employees_repo=EmptyEmployees(), directory=directory)
    return create_app(container).test_client()


@pytest.fixture(autouse=True)
def testing_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")


@pytest.fixture
def client():
    bruce = HourlyEmployee(
        EmployeeId.of("emp200109101000001"),
        Salary.hourly("100.00"),
        (TimeCard(date(2019, 9, 2), 8), TimeCard(date(2019, 9, 3), 10)),
    )
    return client_for(InMemoryDirectory({EmployeeType.HOURLY: [bruce]}))


def test_payroll_by_category(client):
    resp = client.get("/api/payroll/hourly?start=2019-09-01&end=2019-09-30")

    assert resp.status_code == 200
    assert resp.get_json() == [
        {
            "employee_id": "emp200109101000001",
            "period_start": "2019-09-01",
            "period_end": "2019-09-30",
            "amount": "1900.00",
        }
    ]


def test_payroll_run_for_all_categories(client):
    resp = client.get("/api/payroll?start=2019-09-01&end=2019-09-30")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["count"] == 1
    assert body["total"] == "1900.00"
    assert body["payrolls"]["salaried"] == []


def test_payroll_run_single_category(client):
    body = client.get("/api/payroll?start=2019-09-01&end=2019-09-30&category=SALARIED").get_json()

    assert list(body["payrolls"]) == ["salaried"]


def test_unknown_category_is_404(client):
    assert client.get("/api/payroll/contractor?start=2019-09-01&end=2019-09-30").status_code == 404
    assert client.get("/api/payroll?start=2019-09-01&end=2019-09-30&category=contractor").status_code == 404


@pytest.mark.parametrize(
    "query",
    [
        "",
        "?start=2019-09-01",
        "?start=2019-09-30&end=2019-09-01",
        "?start=09/01/2019&end=2019-09-30",
    ],
)
def test_bad_period_is_400(client, query):
    resp = client.get(f"/api/payroll/hourly{query}")

    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_directory_unavailable_is_503():
    resp = client_for(FailingDirectory()).get("/api/payroll?start=2019-09-01&end=2019-09-30")

    assert resp.status_code == 503
    assert resp.get_json() == {"error": "db is down"}
