from __future__ import annotations

import logging
from typing import Dict, List, Sequence

import mysql.connector

from ..core.enums import EmployeeType, LeaveKind
from ..core.exceptions import DirectoryUnavailable
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, db_cursor, fetchall, in_clause
from .hourly.model import HourlyEmployee, TimeCard
from .model import EmployeeId, Period, Salary
from .repository import EmployeeDirectory, PayrollEmployee
from .salaried.model import Absence, SalariedEmployee

logger = logging.getLogger(__name__)


class MySQLEmployeeDirectory(EmployeeDirectory):
    """Loads payroll aggregates with their records for one period attached.

    Employees qualify when they boarded on or before the end of the period.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def all_employees_of(self, category: EmployeeType, period: Period) -> Sequence[PayrollEmployee]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    SELECT id, salary
                    FROM employees
                    WHERE employee_type=%s AND boarding_date <= %s
                    ORDER BY id ASC
                    """,
                    (category.value, period.end),
                )
                employees = fetchall(cur)
                if not employees:
                    return []

                ids = [str(e["id"]) for e in employees]
                if category is EmployeeType.HOURLY:
                    return self._hourly(employees, self._time_cards(cur, ids, period))
                return self._salaried(employees, self._absences(cur, ids, period))
        except mysql.connector.Error as exc:
            logger.exception("Employee directory query failed for %s %s", category.value, period)
            raise DirectoryUnavailable(f"Employee directory unavailable: {exc}") from exc

    def _time_cards(self, cur, ids: List[str], period: Period) -> Dict[str, List[TimeCard]]:
        cur.execute(
            f"""
            SELECT employee_id, work_date, work_hours
            FROM time_cards
            WHERE employee_id IN ({in_clause(ids)}) AND work_date BETWEEN %s AND %s
            ORDER BY work_date ASC
            """,
            (*ids, period.start, period.end),
        )
        cards: Dict[str, List[TimeCard]] = {}
        for r in fetchall(cur):
            cards.setdefault(str(r["employee_id"]), []).append(
                TimeCard(work_date=r["work_date"], work_hours=int(r["work_hours"]))
            )
        return cards

    def _absences(self, cur, ids: List[str], period: Period) -> Dict[str, List[Absence]]:
        cur.execute(
            f"""
            SELECT employee_id, leave_date, leave_kind, reason
            FROM absences
            WHERE employee_id IN ({in_clause(ids)}) AND leave_date BETWEEN %s AND %s
            ORDER BY leave_date ASC
            """,
            (*ids, period.start, period.end),
        )
        absences: Dict[str, List[Absence]] = {}
        for r in fetchall(cur):
            absences.setdefault(str(r["employee_id"]), []).append(
                Absence(leave_date=r["leave_date"], kind=LeaveKind(r["leave_kind"]), reason=r.get("reason"))
            )
        return absences

    @staticmethod
    def _hourly(rows, cards: Dict[str, List[TimeCard]]) -> List[HourlyEmployee]:
        return [
            HourlyEmployee(
                employee_id=EmployeeId.of(str(r["id"])),
                hourly_rate=Salary.hourly(as_decimal(r["salary"])),
                time_cards=tuple(cards.get(str(r["id"]), ())),
            )
            for r in rows
        ]

    @staticmethod
    def _salaried(rows, absences: Dict[str, List[Absence]]) -> List[SalariedEmployee]:
        return [
            SalariedEmployee(
                employee_id=EmployeeId.of(str(r["id"])),
                monthly_rate=Salary.monthly(as_decimal(r["salary"])),
                absences=tuple(absences.get(str(r["id"]), ())),
            )
            for r in rows
        ]
