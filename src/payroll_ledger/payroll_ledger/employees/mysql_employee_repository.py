from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import EmployeeStatus, SalaryFrequency
from ..database.mysql_base import MySQLRepository, as_money, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, company_id, name, status, salary, salary_frequency"


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        company_id=int(r["company_id"]),
        name=r["name"],
        status=EmployeeStatus(r["status"]),
        base_salary=as_money(r.get("salary")),
        salary_frequency=SalaryFrequency(r.get("salary_frequency") or SalaryFrequency.DAILY.value),
    )


class MySQLEmployeeRepository(MySQLRepository, EmployeeRepository):
    def list_active(self, company_id: int) -> Sequence[Employee]:
        with self._cursor() as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM employees
                WHERE company_id=%s AND status=%s
                ORDER BY employee_id ASC
                """,
                (int(company_id), EmployeeStatus.ACTIVE.value),
            )
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, company_id: int, employee_id: int) -> Optional[Employee]:
        with self._cursor() as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s AND company_id=%s",
                (int(employee_id), int(company_id)),
            )
            r = fetchone(cur)
            return _to_employee(r) if r else None
