from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional, Sequence

from ..accounts.repository import AccountRepository
from ..advances.repository import AdvanceRepository
from ..attendance.repository import AttendanceRepository
from ..common.validators import require_date_range, require_id, to_money
from ..core.constants import DEFAULT_PAYROLL_HISTORY_LIMIT, SALARY_CATEGORY
from ..core.enums import SalaryFrequency, TransactionType
from ..core.exceptions import DomainError, DuplicatePeriodError, NotFoundError, PartialCommitError
from ..database.unit_of_work import UnitOfWork
from ..employees.repository import EmployeeRepository
from ..transactions.repository import TransactionRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .locks import PeriodLocks
from .model import BatchCommitResult, CommitFailure, CommitLine, PayrollCommit, PayrollRecord, PreviewRow
from .repository import PayrollRepository

logger = logging.getLogger(__name__)


class PayrollService:
    """Payroll preview (read-only) and once-per-period payroll commits."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        advances: AdvanceRepository,
        transactions: TransactionRepository,
        payrolls: PayrollRepository,
        accounts: AccountRepository,
        uow: UnitOfWork,
        *,
        calculator: Optional[PayrollCalculator] = None,
        locks: Optional[PeriodLocks] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._advances = advances
        self._transactions = transactions
        self._payrolls = payrolls
        self._accounts = accounts
        self._uow = uow
        self._calculator = calculator or StandardPayrollCalculator()
        self._locks = locks or PeriodLocks()

    def compute_preview(
        self,
        company_id: int,
        from_date: Optional[date],
        to_date: Optional[date],
    ) -> list[PreviewRow]:
        from_date, to_date = require_date_range(from_date, to_date)
        company_id = require_id(company_id, "companyId")

        # Company-wide, not per employee: transactions carry no employee reference.
        total_salary_paid = self._transactions.sum_by_category_in_range(
            SALARY_CATEGORY, company_id, from_date, to_date
        )
        logger.debug(
            "totalSalaryPaid for company_id=%s %s..%s is company-wide: %s",
            company_id, from_date, to_date, total_salary_paid,
        )

        rows: list[PreviewRow] = []
        for employee in self._employees.list_active(company_id):
            if employee.salary_frequency is SalaryFrequency.MONTHLY:
                logger.debug("employee_id=%s is Monthly; salary still applied per attendance unit", employee.employee_id)

            records = tuple(
                self._attendance.list_in_range(employee.employee_id, company_id, from_date, to_date)
            )
            rows.append(
                PreviewRow(
                    employee_id=employee.employee_id,
                    employee_name=employee.name,
                    base_salary=employee.base_salary,
                    gross_salary=self._calculator.gross_salary(employee, records),
                    attendance_records=records,
                    total_advance=self._advances.sum_in_range(employee.employee_id, company_id, from_date, to_date),
                    total_salary_paid=total_salary_paid,
                )
            )
        return rows

    def commit_payroll(
        self,
        company_id: int,
        employee_id: int,
        account_id: int,
        from_date: Optional[date],
        to_date: Optional[date],
        net_amount,
        remarks: Optional[str] = None,
    ) -> PayrollCommit:
        """Persist one PayrollRecord and its mirrored Salary transaction.

        Raises DuplicatePeriodError when the employee already has a record for exactly
        this period. Overlapping periods are not checked.
        """

        company_id = require_id(company_id, "companyId")
        employee_id = require_id(employee_id, "employeeId")
        account_id = require_id(account_id, "accountId")
        from_date, to_date = require_date_range(from_date, to_date)
        amount = to_money(net_amount)

        employee = self._employees.get_by_id(company_id, employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        if not self._accounts.get_by_id(company_id, account_id):
            raise NotFoundError("Account not found")

        with self._locks.hold((company_id, employee_id, from_date, to_date)):
            if self._payrolls.find_by_period(employee_id, from_date, to_date, company_id):
                logger.warning(
                    "Duplicate payroll rejected: employee_id=%s period=%s..%s", employee_id, from_date, to_date
                )
                raise DuplicatePeriodError(employee_id, from_date, to_date)

            with self._uow.begin() as scope:
                record = scope.payrolls.create(
                    employee_id=employee_id,
                    account_id=account_id,
                    company_id=company_id,
                    from_date=from_date,
                    to_date=to_date,
                    amount=amount,
                    remarks=remarks or None,
                )
                txn = scope.transactions.create(
                    company_id=company_id,
                    account_id=account_id,
                    amount=amount,
                    category=SALARY_CATEGORY,
                    type=TransactionType.CASH_OUT,
                    transaction_date=to_date,
                    description=f"Salary {employee.name} {from_date.isoformat()} to {to_date.isoformat()}",
                )

        logger.info(
            "Payroll %s saved: employee_id=%s period=%s..%s amount=%s transaction_id=%s",
            record.payroll_id, employee_id, from_date, to_date, amount, txn.transaction_id,
        )
        return PayrollCommit(payroll=record, transaction=txn)

    def commit_batch(
        self,
        company_id: int,
        account_id: int,
        from_date: Optional[date],
        to_date: Optional[date],
        lines: Iterable[CommitLine],
    ) -> BatchCommitResult:
        """Commit every line independently; raise PartialCommitError if any failed.

        Company, account and period are shared by all lines, so they are checked
        once up front and fail the whole batch before anything is written.
        """

        company_id = require_id(company_id, "companyId")
        account_id = require_id(account_id, "accountId")
        from_date, to_date = require_date_range(from_date, to_date)
        if not self._accounts.get_by_id(company_id, account_id):
            raise NotFoundError("Account not found")

        result = BatchCommitResult()
        for line in lines:
            try:
                commit = self.commit_payroll(
                    company_id,
                    line.employee_id,
                    account_id,
                    from_date,
                    to_date,
                    line.net_amount,
                    line.remarks,
                )
            except DomainError as exc:
                result.failed.append(
                    CommitFailure(
                        employee_id=line.employee_id,
                        error=exc,
                        duplicate=isinstance(exc, DuplicatePeriodError),
                    )
                )
                continue
            result.succeeded.append(commit)

        if result.failed:
            logger.warning(
                "Payroll batch %s..%s: %s saved, %s failed",
                from_date, to_date, len(result.succeeded), len(result.failed),
            )
            raise PartialCommitError(result.succeeded, result.failed)
        return result

    def list_payrolls(
        self,
        company_id: int,
        *,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
        employee_id: Optional[int] = None,
        account_id: Optional[int] = None,
    ) -> Sequence[PayrollRecord]:
        """History filtered by employee, account and period.

        The period filter applies only when both ends are given; a lone
        ``from_date`` or ``to_date`` is ignored.
        """

        if from_date is None or to_date is None:
            from_date = to_date = None
        return self._payrolls.list_filtered(
            require_id(company_id, "companyId"),
            from_date=from_date,
            to_date=to_date,
            employee_id=employee_id,
            account_id=account_id,
            limit=DEFAULT_PAYROLL_HISTORY_LIMIT,
        )
