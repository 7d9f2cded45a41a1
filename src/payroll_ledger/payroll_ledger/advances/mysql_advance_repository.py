from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..database.mysql_base import MySQLRepository, as_money, fetchall, fetchone
from .model import Advance
from .repository import AdvanceRepository

_COLUMNS = "advance_id, employee_id, company_id, amount, reason, advance_date, transaction_id"


def _to_advance(r: dict) -> Advance:
    return Advance(
        advance_id=int(r["advance_id"]),
        employee_id=int(r["employee_id"]),
        company_id=int(r["company_id"]),
        amount=as_money(r["amount"]),
        advance_date=r["advance_date"],
        reason=r.get("reason"),
        transaction_id=int(r["transaction_id"]) if r.get("transaction_id") else None,
    )


class MySQLAdvanceRepository(MySQLRepository, AdvanceRepository):
    def sum_in_range(self, employee_id: int, company_id: int, from_date: date, to_date: date) -> Decimal:
        with self._cursor() as (_, cur):
            cur.execute(
                """
                SELECT SUM(amount) AS total
                FROM advances
                WHERE employee_id=%s AND company_id=%s AND advance_date BETWEEN %s AND %s
                """,
                (int(employee_id), int(company_id), from_date, to_date),
            )
            r = fetchone(cur)
            return as_money(r["total"] if r else None)

    def create(
        self,
        *,
        employee_id: int,
        company_id: int,
        amount: Decimal,
        advance_date: date,
        reason: Optional[str] = None,
        transaction_id: Optional[int] = None,
    ) -> Advance:
        with self._cursor() as (_, cur):
            cur.execute(
                """
                INSERT INTO advances(employee_id, company_id, amount, reason, advance_date, transaction_id)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (int(employee_id), int(company_id), amount, reason, advance_date, transaction_id),
            )
            return Advance(
                advance_id=int(cur.lastrowid),
                employee_id=int(employee_id),
                company_id=int(company_id),
                amount=amount,
                advance_date=advance_date,
                reason=reason,
                transaction_id=transaction_id,
            )

    def get_by_id(self, company_id: int, advance_id: int) -> Optional[Advance]:
        with self._cursor() as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM advances WHERE advance_id=%s AND company_id=%s",
                (int(advance_id), int(company_id)),
            )
            r = fetchone(cur)
            return _to_advance(r) if r else None

    def delete(self, company_id: int, advance_id: int) -> bool:
        with self._cursor() as (_, cur):
            cur.execute(
                "DELETE FROM advances WHERE advance_id=%s AND company_id=%s",
                (int(advance_id), int(company_id)),
            )
            return cur.rowcount > 0

    def list_for_company(self, company_id: int, *, employee_id: Optional[int] = None) -> Sequence[Advance]:
        clauses = ["company_id=%s"]
        params: list[object] = [int(company_id)]
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(employee_id))

        where = " AND ".join(clauses)

        with self._cursor() as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM advances WHERE {where} ORDER BY advance_date DESC, advance_id DESC",
                tuple(params),
            )
            return [_to_advance(r) for r in fetchall(cur)]
