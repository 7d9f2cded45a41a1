from __future__ import annotations

import copy
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional

import pytest

from src.payroll_ledger.payroll_ledger.accounts.model import Account
from src.payroll_ledger.payroll_ledger.advances.model import Advance
from src.payroll_ledger.payroll_ledger.advances.service import AdvanceService
from src.payroll_ledger.payroll_ledger.attendance.model import AttendanceRecord
from src.payroll_ledger.payroll_ledger.attendance.service import AttendanceService
from src.payroll_ledger.payroll_ledger.core.enums import (
    AttendanceStatus,
    EmployeeStatus,
    SalaryFrequency,
    TransactionType,
)
from src.payroll_ledger.payroll_ledger.core.exceptions import DuplicatePeriodError
from src.payroll_ledger.payroll_ledger.database.unit_of_work import LedgerScope
from src.payroll_ledger.payroll_ledger.employees.model import Employee
from src.payroll_ledger.payroll_ledger.payroll.model import PayrollRecord
from src.payroll_ledger.payroll_ledger.payroll.service import PayrollService
from src.payroll_ledger.payroll_ledger.transactions.model import Transaction

COMPANY = 1
OTHER_COMPANY = 2
ACCOUNT = 10


class InMemoryEmployees:
    def __init__(self):
        self.by_id: dict[int, Employee] = {}

    def add(self, employee_id: int, name: str, salary, *, company_id: int = COMPANY, active: bool = True,
            frequency: SalaryFrequency = SalaryFrequency.DAILY) -> Employee:
        emp = Employee(
            employee_id=employee_id,
            company_id=company_id,
            name=name,
            status=EmployeeStatus.ACTIVE if active else EmployeeStatus.INACTIVE,
            base_salary=Decimal(str(salary)),
            salary_frequency=frequency,
        )
        self.by_id[employee_id] = emp
        return emp

    def list_active(self, company_id: int):
        return [e for e in self.by_id.values() if e.company_id == company_id and e.is_active]

    def get_by_id(self, company_id: int, employee_id: int) -> Optional[Employee]:
        emp = self.by_id.get(employee_id)
        return emp if emp and emp.company_id == company_id else None


@dataclass
class InMemoryAccounts:
    accounts: dict[int, Account] = field(default_factory=dict)

    def get_by_id(self, company_id: int, account_id: int) -> Optional[Account]:
        acc = self.accounts.get(account_id)
        return acc if acc and acc.company_id == company_id else None


class InMemoryAttendance:
    def __init__(self):
        self._by_employee_date: dict[tuple[int, date], AttendanceRecord] = {}
        self._id = 0
        self.fail_for: set[int] = set()

    def upsert(self, *, employee_id: int, company_id: int, work_date: date, status: AttendanceStatus):
        existing = self._by_employee_date.get((employee_id, work_date))
        if existing:
            attendance_id = existing.attendance_id
        else:
            self._id += 1
            attendance_id = self._id
        rec = AttendanceRecord(
            attendance_id=attendance_id,
            employee_id=employee_id,
            company_id=company_id,
            work_date=work_date,
            status=status,
        )
        self._by_employee_date[(employee_id, work_date)] = rec
        return rec

    def get_for_employee_and_date(self, employee_id: int, work_date: date):
        return self._by_employee_date.get((employee_id, work_date))

    def list_in_range(self, employee_id: int, company_id: int, from_date: date, to_date: date):
        if employee_id in self.fail_for:
            raise RuntimeError("attendance query failed")
        items = [
            r for r in self._by_employee_date.values()
            if r.employee_id == employee_id and r.company_id == company_id and from_date <= r.work_date <= to_date
        ]
        return sorted(items, key=lambda r: r.work_date)

    def list_for_date(self, company_id: int, work_date: date):
        return [r for r in self._by_employee_date.values() if r.company_id == company_id and r.work_date == work_date]


class Ledger:
    """Shared in-memory tables for advances, transactions and payroll."""

    def __init__(self):
        self.advances: dict[int, Advance] = {}
        self.transactions: dict[int, Transaction] = {}
        self.payrolls: dict[int, PayrollRecord] = {}
        self.next_id = 0

    def new_id(self) -> int:
        self.next_id += 1
        return self.next_id


class InMemoryAdvances:
    def __init__(self, ledger: Ledger):
        self._ledger = ledger

    def sum_in_range(self, employee_id, company_id, from_date, to_date) -> Decimal:
        return sum(
            (a.amount for a in self._ledger.advances.values()
             if a.employee_id == employee_id and a.company_id == company_id
             and from_date <= a.advance_date <= to_date),
            Decimal("0.00"),
        )

    def create(self, *, employee_id, company_id, amount, advance_date, reason=None, transaction_id=None):
        adv = Advance(
            advance_id=self._ledger.new_id(),
            employee_id=employee_id,
            company_id=company_id,
            amount=amount,
            advance_date=advance_date,
            reason=reason,
            transaction_id=transaction_id,
        )
        self._ledger.advances[adv.advance_id] = adv
        return adv

    def get_by_id(self, company_id, advance_id):
        adv = self._ledger.advances.get(advance_id)
        return adv if adv and adv.company_id == company_id else None

    def delete(self, company_id, advance_id) -> bool:
        return self._ledger.advances.pop(advance_id, None) is not None

    def list_for_company(self, company_id, *, employee_id=None):
        return [
            a for a in self._ledger.advances.values()
            if a.company_id == company_id and (employee_id is None or a.employee_id == employee_id)
        ]


class InMemoryTransactions:
    def __init__(self, ledger: Ledger):
        self._ledger = ledger
        self.fail_next_create = False

    def sum_by_category_in_range(self, category, company_id, from_date, to_date) -> Decimal:
        return sum(
            (t.amount for t in self._ledger.transactions.values()
             if t.category == category and t.company_id == company_id
             and from_date <= t.transaction_date <= to_date),
            Decimal("0.00"),
        )

    def create(self, *, company_id, account_id, amount, category, type, transaction_date, description=None):
        if self.fail_next_create:
            self.fail_next_create = False
            raise RuntimeError("ledger write failed")
        txn = Transaction(
            transaction_id=self._ledger.new_id(),
            company_id=company_id,
            account_id=account_id,
            amount=amount,
            category=category,
            type=type,
            transaction_date=transaction_date,
            description=description,
        )
        self._ledger.transactions[txn.transaction_id] = txn
        return txn

    def delete(self, company_id, transaction_id) -> bool:
        return self._ledger.transactions.pop(transaction_id, None) is not None

    def add_manual(self, *, amount, category, on: date, company_id: int = COMPANY):
        return self.create(
            company_id=company_id,
            account_id=ACCOUNT,
            amount=Decimal(str(amount)),
            category=category,
            type=TransactionType.CASH_OUT,
            transaction_date=on,
        )


class InMemoryPayrolls:
    """Enforces the (employee, from, to, company) key like the UNIQUE index does."""

    def __init__(self, ledger: Ledger):
        self._ledger = ledger
        self.skip_lookup = False

    def find_by_period(self, employee_id, from_date, to_date, company_id):
        if self.skip_lookup:
            return None
        for p in self._ledger.payrolls.values():
            if (p.employee_id, p.from_date, p.to_date, p.company_id) == (employee_id, from_date, to_date, company_id):
                return p
        return None

    def create(self, *, employee_id, account_id, company_id, from_date, to_date, amount, remarks=None):
        for p in self._ledger.payrolls.values():
            if (p.employee_id, p.from_date, p.to_date, p.company_id) == (employee_id, from_date, to_date, company_id):
                raise DuplicatePeriodError(employee_id, from_date, to_date)
        rec = PayrollRecord(
            payroll_id=self._ledger.new_id(),
            employee_id=employee_id,
            account_id=account_id,
            company_id=company_id,
            from_date=from_date,
            to_date=to_date,
            amount=amount,
            remarks=remarks,
        )
        self._ledger.payrolls[rec.payroll_id] = rec
        return rec

    def list_filtered(self, company_id, *, from_date=None, to_date=None, employee_id=None, account_id=None, limit=500):
        items = [
            p for p in self._ledger.payrolls.values()
            if p.company_id == company_id
            and (from_date is None or p.from_date >= from_date)
            and (to_date is None or p.to_date <= to_date)
            and (employee_id is None or p.employee_id == employee_id)
            and (account_id is None or p.account_id == account_id)
        ]
        items.sort(key=lambda p: p.payroll_id, reverse=True)
        return items[:limit]


class InMemoryUnitOfWork:
    """Snapshot the ledger on begin and restore it if the block raises."""

    def __init__(self, ledger: Ledger, scope: LedgerScope):
        self._ledger = ledger
        self._scope = scope
        self.commits = 0
        self.rollbacks = 0

    @contextmanager
    def begin(self):
        snapshot = copy.deepcopy(self._ledger.__dict__)
        try:
            yield self._scope
        except Exception:
            self._ledger.__dict__.update(snapshot)
            self.rollbacks += 1
            raise
        self.commits += 1


@dataclass
class World:
    employees: InMemoryEmployees
    accounts: InMemoryAccounts
    attendance: InMemoryAttendance
    ledger: Ledger
    advances: InMemoryAdvances
    transactions: InMemoryTransactions
    payrolls: InMemoryPayrolls
    uow: InMemoryUnitOfWork

    def payroll_service(self, **kwargs) -> PayrollService:
        return PayrollService(
            self.employees,
            self.attendance,
            self.advances,
            self.transactions,
            self.payrolls,
            self.accounts,
            self.uow,
            **kwargs,
        )

    def advance_service(self) -> AdvanceService:
        return AdvanceService(self.advances, self.employees, self.accounts, self.uow)

    def attendance_service(self) -> AttendanceService:
        return AttendanceService(self.attendance, self.employees)

    def mark(self, employee_id: int, work_date: date, status: AttendanceStatus, company_id: int = COMPANY):
        return self.attendance.upsert(employee_id=employee_id, company_id=company_id, work_date=work_date, status=status)


@pytest.fixture
def world() -> World:
    ledger = Ledger()
    advances = InMemoryAdvances(ledger)
    transactions = InMemoryTransactions(ledger)
    payrolls = InMemoryPayrolls(ledger)
    accounts = InMemoryAccounts({ACCOUNT: Account(account_id=ACCOUNT, company_id=COMPANY, name="Main Site")})
    return World(
        employees=InMemoryEmployees(),
        accounts=accounts,
        attendance=InMemoryAttendance(),
        ledger=ledger,
        advances=advances,
        transactions=transactions,
        payrolls=payrolls,
        uow=InMemoryUnitOfWork(
            ledger,
            LedgerScope(payrolls=payrolls, transactions=transactions, advances=advances),
        ),
    )
