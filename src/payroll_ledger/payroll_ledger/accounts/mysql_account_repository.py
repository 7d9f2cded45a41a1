from __future__ import annotations

from typing import Optional

from ..database.mysql_base import MySQLRepository, fetchone
from .model import Account
from .repository import AccountRepository


class MySQLAccountRepository(MySQLRepository, AccountRepository):
    def get_by_id(self, company_id: int, account_id: int) -> Optional[Account]:
        with self._cursor() as (_, cur):
            cur.execute(
                "SELECT account_id, company_id, name FROM accounts WHERE account_id=%s AND company_id=%s",
                (int(account_id), int(company_id)),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Account(account_id=int(r["account_id"]), company_id=int(r["company_id"]), name=r["name"])
