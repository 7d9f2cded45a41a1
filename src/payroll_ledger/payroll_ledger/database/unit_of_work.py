from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import ContextManager, Protocol

from ..advances.mysql_advance_repository import MySQLAdvanceRepository
from ..advances.repository import AdvanceRepository
from ..payroll.mysql_payroll_repository import MySQLPayrollRepository
from ..payroll.repository import PayrollRepository
from ..transactions.mysql_transaction_repository import MySQLTransactionRepository
from ..transactions.repository import TransactionRepository
from .connection import DatabaseConnection
from .mysql_base import db_cursor


@dataclass(frozen=True)
class LedgerScope:
    """Repositories sharing one database transaction."""

    payrolls: PayrollRepository
    transactions: TransactionRepository
    advances: AdvanceRepository


class UnitOfWork(Protocol):
    def begin(self) -> ContextManager[LedgerScope]:
        """Commit when the block exits normally, roll back every write otherwise."""

        raise NotImplementedError


class MySQLUnitOfWork(UnitOfWork):
    def __init__(
        self,
        conn_factory: DatabaseConnection,
        *,
        payrolls: MySQLPayrollRepository,
        transactions: MySQLTransactionRepository,
        advances: MySQLAdvanceRepository,
    ):
        self._conn_factory = conn_factory
        self._payrolls = payrolls
        self._transactions = transactions
        self._advances = advances

    @contextmanager
    def begin(self):
        with db_cursor(self._conn_factory) as (_, cur):
            yield LedgerScope(
                payrolls=self._payrolls.bind(cur),
                transactions=self._transactions.bind(cur),
                advances=self._advances.bind(cur),
            )
