from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..accounts.repository import AccountRepository
from ..common.validators import require_id, require_positive_money
from ..core.constants import SALARY_ADVANCE_CATEGORY
from ..core.enums import TransactionType
from ..core.exceptions import NotFoundError, ValidationError
from ..database.unit_of_work import LedgerScope, UnitOfWork
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .model import Advance
from .repository import AdvanceRepository

logger = logging.getLogger(__name__)


class AdvanceService:
    """Advance ledger writes.

    Every advance is written together with its "Salary Advance" Cash-Out transaction
    in one unit of work, so the two ledgers cannot drift apart.
    """

    def __init__(
        self,
        advances: AdvanceRepository,
        employees: EmployeeRepository,
        accounts: AccountRepository,
        uow: UnitOfWork,
    ):
        self._advances = advances
        self._employees = employees
        self._accounts = accounts
        self._uow = uow

    def _require_active_employee(self, company_id: int, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(company_id, employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        if not employee.is_active:
            raise ValidationError("Employee is not active")
        return employee

    def _require_account(self, company_id: int, account_id: int) -> None:
        if not self._accounts.get_by_id(company_id, account_id):
            raise NotFoundError("Account not found")

    @staticmethod
    def _write_pair(
        scope: LedgerScope,
        *,
        company_id: int,
        employee: Employee,
        account_id: int,
        amount,
        advance_date: date,
        reason: Optional[str],
    ) -> Advance:
        txn = scope.transactions.create(
            company_id=company_id,
            account_id=account_id,
            amount=amount,
            category=SALARY_ADVANCE_CATEGORY,
            type=TransactionType.CASH_OUT,
            transaction_date=advance_date,
            description=f"Advance to {employee.name}" + (f": {reason}" if reason else ""),
        )
        return scope.advances.create(
            employee_id=employee.employee_id,
            company_id=company_id,
            amount=amount,
            advance_date=advance_date,
            reason=reason,
            transaction_id=txn.transaction_id,
        )

    def record_advance_payment(
        self,
        company_id: int,
        employee_id: int,
        account_id: int,
        amount,
        advance_date: Optional[date],
        reason: Optional[str] = None,
    ) -> Advance:
        company_id = require_id(company_id, "companyId")
        employee_id = require_id(employee_id, "employeeId")
        account_id = require_id(account_id, "accountId")
        amount = require_positive_money(amount)
        if advance_date is None:
            raise ValidationError("date is required")

        employee = self._require_active_employee(company_id, employee_id)
        self._require_account(company_id, account_id)

        with self._uow.begin() as scope:
            advance = self._write_pair(
                scope,
                company_id=company_id,
                employee=employee,
                account_id=account_id,
                amount=amount,
                advance_date=advance_date,
                reason=reason or None,
            )

        logger.info(
            "Advance %s recorded: employee_id=%s amount=%s date=%s",
            advance.advance_id, employee_id, amount, advance_date,
        )
        return advance

    def reconcile_advance(
        self,
        company_id: int,
        advance_id: int,
        *,
        account_id: int,
        amount,
        advance_date: Optional[date],
        reason: Optional[str] = None,
        employee_id: Optional[int] = None,
    ) -> Advance:
        """Replace an advance and its mirrored transaction (delete-then-recreate, atomically)."""

        company_id = require_id(company_id, "companyId")
        advance_id = require_id(advance_id, "advanceId")
        account_id = require_id(account_id, "accountId")
        amount = require_positive_money(amount)
        if advance_date is None:
            raise ValidationError("date is required")

        existing = self._advances.get_by_id(company_id, advance_id)
        if not existing:
            raise NotFoundError("Advance not found")

        target_employee_id = require_id(employee_id, "employeeId") if employee_id is not None else existing.employee_id
        employee = self._require_active_employee(company_id, target_employee_id)
        self._require_account(company_id, account_id)

        with self._uow.begin() as scope:
            scope.advances.delete(company_id, existing.advance_id)
            if existing.transaction_id is not None:
                scope.transactions.delete(company_id, existing.transaction_id)
            advance = self._write_pair(
                scope,
                company_id=company_id,
                employee=employee,
                account_id=account_id,
                amount=amount,
                advance_date=advance_date,
                reason=reason or None,
            )

        logger.info("Advance %s reconciled as %s", existing.advance_id, advance.advance_id)
        return advance

    def delete_advance(self, company_id: int, advance_id: int) -> None:
        company_id = require_id(company_id, "companyId")
        advance_id = require_id(advance_id, "advanceId")

        existing = self._advances.get_by_id(company_id, advance_id)
        if not existing:
            raise NotFoundError("Advance not found")

        with self._uow.begin() as scope:
            scope.advances.delete(company_id, existing.advance_id)
            if existing.transaction_id is not None:
                scope.transactions.delete(company_id, existing.transaction_id)

        logger.info("Advance %s deleted with transaction %s", existing.advance_id, existing.transaction_id)

    def list_advances(self, company_id: int, *, employee_id: Optional[int] = None) -> Sequence[Advance]:
        return self._advances.list_for_company(
            require_id(company_id, "companyId"),
            employee_id=require_id(employee_id, "employeeId") if employee_id is not None else None,
        )
