from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.enums import TransactionType
from ..database.mysql_base import MySQLRepository, as_money, fetchone
from .model import Transaction
from .repository import TransactionRepository


class MySQLTransactionRepository(MySQLRepository, TransactionRepository):
    def sum_by_category_in_range(self, category: str, company_id: int, from_date: date, to_date: date) -> Decimal:
        with self._cursor() as (_, cur):
            cur.execute(
                """
                SELECT SUM(amount) AS total
                FROM transactions
                WHERE category=%s AND company_id=%s AND transaction_date BETWEEN %s AND %s
                """,
                (category, int(company_id), from_date, to_date),
            )
            r = fetchone(cur)
            return as_money(r["total"] if r else None)

    def create(
        self,
        *,
        company_id: int,
        account_id: int,
        amount: Decimal,
        category: str,
        type: TransactionType,
        transaction_date: date,
        description: Optional[str] = None,
    ) -> Transaction:
        with self._cursor() as (_, cur):
            cur.execute(
                """
                INSERT INTO transactions(company_id, account_id, amount, category, type, transaction_date, description)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (int(company_id), int(account_id), amount, category, type.value, transaction_date, description),
            )
            return Transaction(
                transaction_id=int(cur.lastrowid),
                company_id=int(company_id),
                account_id=int(account_id),
                amount=amount,
                category=category,
                type=type,
                transaction_date=transaction_date,
                description=description,
            )

    def delete(self, company_id: int, transaction_id: int) -> bool:
        with self._cursor() as (_, cur):
            cur.execute(
                "DELETE FROM transactions WHERE transaction_id=%s AND company_id=%s",
                (int(transaction_id), int(company_id)),
            )
            return cur.rowcount > 0
