from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..transactions.model import Transaction


@dataclass(frozen=True)
class PayrollRecord:
    """One finalized payroll run for one employee over one period."""

    payroll_id: int
    employee_id: int
    account_id: int
    company_id: int
    from_date: date
    to_date: date
    amount: Decimal
    remarks: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.payroll_id,
            "employeeId": self.employee_id,
            "accountId": self.account_id,
            "fromDate": self.from_date.isoformat(),
            "toDate": self.to_date.isoformat(),
            "amount": str(self.amount),
            "remarks": self.remarks,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass(frozen=True)
class PreviewRow:
    """Read-model for one employee's payroll preview over a period."""

    employee_id: int
    employee_name: str
    base_salary: Decimal
    gross_salary: Decimal
    attendance_records: tuple[AttendanceRecord, ...]
    total_advance: Decimal
    total_salary_paid: Decimal

    @property
    def days_worked(self) -> Decimal:
        # Sum of multipliers, so an OT 8 Hrs day counts as two days.
        return sum((r.status.pay_multiplier for r in self.attendance_records), Decimal("0"))

    @property
    def ot_hours(self) -> int:
        return sum(r.status.ot_hours for r in self.attendance_records)

    @property
    def net_balance(self) -> Decimal:
        return self.gross_salary - self.total_advance

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "baseSalary": str(self.base_salary),
            "grossSalary": str(self.gross_salary),
            "totalAdvance": str(self.total_advance),
            "totalSalaryPaid": str(self.total_salary_paid),
            "daysWorked": str(self.days_worked),
            "otHours": self.ot_hours,
            "netBalance": str(self.net_balance),
            "attendanceRecords": [r.to_dict() for r in self.attendance_records],
        }


@dataclass(frozen=True)
class PayrollCommit:
    payroll: PayrollRecord
    transaction: Transaction

    def to_dict(self) -> dict:
        return {"payroll": self.payroll.to_dict(), "transaction": self.transaction.to_dict()}


@dataclass(frozen=True)
class CommitLine:
    """One employee's share of a batch save."""

    employee_id: int
    net_amount: Decimal
    remarks: Optional[str] = None


@dataclass(frozen=True)
class CommitFailure:
    employee_id: int
    error: Exception
    duplicate: bool = False

    def to_dict(self) -> dict:
        return {"employeeId": self.employee_id, "error": str(self.error), "duplicate": self.duplicate}


@dataclass
class BatchCommitResult:
    succeeded: list[PayrollCommit] = field(default_factory=list)
    failed: list[CommitFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed

    def to_dict(self) -> dict:
        return {
            "succeeded": [c.to_dict() for c in self.succeeded],
            "failed": [f.to_dict() for f in self.failed],
        }
