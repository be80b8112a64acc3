from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.enums import EmployeeType, Gender
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, db_cursor, fetchall, fetchone
from ..payroll.model import EmployeeId
from .model import Address, Contact, Email, Employee
from .repository import EmployeeRepository

_COLUMNS = """
    id, name, email, employee_type, gender, salary,
    country, province, city, street, zip_code,
    cell_phone, home_phone, boarding_date
"""


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: EmployeeId) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (str(employee_id),))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY id ASC")
            return [_to_employee(r) for r in fetchall(cur)]

    def list_by_type(self, employee_type: EmployeeType) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE employee_type=%s ORDER BY id ASC",
                (employee_type.value,),
            )
            return [_to_employee(r) for r in fetchall(cur)]

    def save(self, employee: Employee) -> None:
        address = employee.address
        contact = employee.contact
        params = (
            str(employee.employee_id),
            employee.name,
            employee.email.value,
            employee.employee_type.value,
            employee.gender.value,
            employee.salary,
            address.country if address else None,
            address.province if address else None,
            address.city if address else None,
            address.street if address else None,
            address.zip_code if address else None,
            contact.cell_phone if contact else None,
            contact.home_phone if contact else None,
            employee.boarding_date,
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO employees ({_COLUMNS})
                VALUES (%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    name=VALUES(name), email=VALUES(email), employee_type=VALUES(employee_type),
                    gender=VALUES(gender), salary=VALUES(salary),
                    country=VALUES(country), province=VALUES(province), city=VALUES(city),
                    street=VALUES(street), zip_code=VALUES(zip_code),
                    cell_phone=VALUES(cell_phone), home_phone=VALUES(home_phone),
                    boarding_date=VALUES(boarding_date)
                """,
                params,
            )

    def delete(self, employee_id: EmployeeId) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE id=%s", (str(employee_id),))
            return cur.rowcount > 0


def _to_employee(r: Dict[str, Any]) -> Employee:
    address = None
    if r.get("country") is not None:
        address = Address(
            country=r["country"],
            province=r.get("province") or "",
            city=r.get("city") or "",
            street=r.get("street") or "",
            zip_code=r.get("zip_code") or "",
        )
    contact = Contact.of(r["cell_phone"], r.get("home_phone")) if r.get("cell_phone") else None

    return Employee(
        employee_id=EmployeeId.of(str(r["id"])),
        name=r["name"],
        email=Email.of(r["email"]),
        employee_type=EmployeeType(r["employee_type"]),
        gender=Gender(r["gender"]),
        salary=as_decimal(r["salary"]),
        boarding_date=r["boarding_date"],
        address=address,
        contact=contact,
    )
