from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .database.connection import DatabaseConnection, DBConfig
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .payroll.calculator.hourly_calculator import HourlyPayrollCalculator
from .payroll.calculator.salaried_calculator import SalariedPayrollCalculator
from .payroll.mysql_employee_directory import MySQLEmployeeDirectory
from .payroll.policy import PayrollPolicy
from .payroll.repository import EmployeeDirectory
from .payroll.service import PayrollRunService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    directory: EmployeeDirectory

    employee_service: EmployeeService
    hourly_calculator: HourlyPayrollCalculator
    salaried_calculator: SalariedPayrollCalculator
    payroll_run_service: PayrollRunService


def build_services(
    *,
    employees_repo: EmployeeRepository,
    directory: EmployeeDirectory,
    policy: Optional[PayrollPolicy] = None,
    max_workers: Optional[int] = None,
) -> Container:
    hourly_calculator = HourlyPayrollCalculator(directory, policy=policy, max_workers=max_workers)
    salaried_calculator = SalariedPayrollCalculator(directory, policy=policy, max_workers=max_workers)

    return Container(
        employees_repo=employees_repo,
        directory=directory,
        employee_service=EmployeeService(employees_repo),
        hourly_calculator=hourly_calculator,
        salaried_calculator=salaried_calculator,
        payroll_run_service=PayrollRunService([hourly_calculator, salaried_calculator]),
    )


def build_container(
    *,
    db_config: dict,
    policy: Optional[PayrollPolicy] = None,
    max_workers: Optional[int] = None,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return build_services(
        employees_repo=MySQLEmployeeRepository(conn),
        directory=MySQLEmployeeDirectory(conn),
        policy=policy,
        max_workers=max_workers,
    )
