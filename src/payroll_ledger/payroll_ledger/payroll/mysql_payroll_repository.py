from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Sequence

import mysql.connector

from ..core.exceptions import DuplicatePeriodError
from ..database.mysql_base import MySQLRepository, as_money, fetchall, fetchone, is_duplicate_key
from .model import PayrollRecord
from .repository import PayrollRepository

_COLUMNS = "payroll_id, employee_id, account_id, company_id, from_date, to_date, amount, remarks, created_at"


def _to_payroll(r: dict) -> PayrollRecord:
    return PayrollRecord(
        payroll_id=int(r["payroll_id"]),
        employee_id=int(r["employee_id"]),
        account_id=int(r["account_id"]),
        company_id=int(r["company_id"]),
        from_date=r["from_date"],
        to_date=r["to_date"],
        amount=as_money(r["amount"]),
        remarks=r.get("remarks"),
        created_at=r.get("created_at"),
    )


class MySQLPayrollRepository(MySQLRepository, PayrollRepository):
    def find_by_period(
        self,
        employee_id: int,
        from_date: date,
        to_date: date,
        company_id: int,
    ) -> Optional[PayrollRecord]:
        with self._cursor() as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM payroll
                WHERE employee_id=%s AND from_date=%s AND to_date=%s AND company_id=%s
                """,
                (int(employee_id), from_date, to_date, int(company_id)),
            )
            r = fetchone(cur)
            return _to_payroll(r) if r else None

    def create(
        self,
        *,
        employee_id: int,
        account_id: int,
        company_id: int,
        from_date: date,
        to_date: date,
        amount: Decimal,
        remarks: Optional[str] = None,
    ) -> PayrollRecord:
        with self._cursor() as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO payroll(employee_id, account_id, company_id, from_date, to_date, amount, remarks)
                    VALUES(%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (int(employee_id), int(account_id), int(company_id), from_date, to_date, amount, remarks),
                )
            except mysql.connector.IntegrityError as exc:
                # uq_payroll_period is the authoritative guard against concurrent saves.
                if is_duplicate_key(exc):
                    raise DuplicatePeriodError(int(employee_id), from_date, to_date) from exc
                raise

            return PayrollRecord(
                payroll_id=int(cur.lastrowid),
                employee_id=int(employee_id),
                account_id=int(account_id),
                company_id=int(company_id),
                from_date=from_date,
                to_date=to_date,
                amount=amount,
                remarks=remarks,
                created_at=datetime.now(),
            )

    def list_filtered(
        self,
        company_id: int,
        *,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
        employee_id: Optional[int] = None,
        account_id: Optional[int] = None,
        limit: int = 500,
    ) -> Sequence[PayrollRecord]:
        clauses = ["company_id=%s"]
        params: list[object] = [int(company_id)]

        if from_date is not None:
            clauses.append("from_date >= %s")
            params.append(from_date)
        if to_date is not None:
            clauses.append("to_date <= %s")
            params.append(to_date)
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(employee_id))
        if account_id is not None:
            clauses.append("account_id=%s")
            params.append(int(account_id))

        where = " AND ".join(clauses)
        params.append(int(limit))

        with self._cursor() as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM payroll
                WHERE {where}
                ORDER BY created_at DESC, payroll_id DESC
                LIMIT %s
                """,
                tuple(params),
            )
            return [_to_payroll(r) for r in fetchall(cur)]
