from __future__ import annotations

from dataclasses import dataclass

from .accounts.mysql_account_repository import MySQLAccountRepository
from .advances.mysql_advance_repository import MySQLAdvanceRepository
from .advances.service import AdvanceService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .database.unit_of_work import MySQLUnitOfWork
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .payroll.locks import PeriodLocks
from .payroll.mysql_payroll_repository import MySQLPayrollRepository
from .payroll.service import PayrollService
from .transactions.mysql_transaction_repository import MySQLTransactionRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    accounts_repo: MySQLAccountRepository
    attendance_repo: MySQLAttendanceRepository
    advances_repo: MySQLAdvanceRepository
    transactions_repo: MySQLTransactionRepository
    payrolls_repo: MySQLPayrollRepository
    uow: MySQLUnitOfWork

    attendance_service: AttendanceService
    advance_service: AdvanceService
    payroll_service: PayrollService


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection(DBConfig.from_settings(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    accounts_repo = MySQLAccountRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    advances_repo = MySQLAdvanceRepository(conn)
    transactions_repo = MySQLTransactionRepository(conn)
    payrolls_repo = MySQLPayrollRepository(conn)
    uow = MySQLUnitOfWork(
        conn,
        payrolls=payrolls_repo,
        transactions=transactions_repo,
        advances=advances_repo,
    )

    attendance_service = AttendanceService(attendance_repo, employees_repo)
    advance_service = AdvanceService(advances_repo, employees_repo, accounts_repo, uow)
    payroll_service = PayrollService(
        employees_repo,
        attendance_repo,
        advances_repo,
        transactions_repo,
        payrolls_repo,
        accounts_repo,
        uow,
        locks=PeriodLocks(),
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        accounts_repo=accounts_repo,
        attendance_repo=attendance_repo,
        advances_repo=advances_repo,
        transactions_repo=transactions_repo,
        payrolls_repo=payrolls_repo,
        uow=uow,
        attendance_service=attendance_service,
        advance_service=advance_service,
        payroll_service=payroll_service,
    )
