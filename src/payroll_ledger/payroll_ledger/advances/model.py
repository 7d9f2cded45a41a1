from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Advance:
    """Cash advance paid to an employee ahead of payroll.

    ``transaction_id`` points at the mirrored "Salary Advance" ledger row, when one was written.
    """

    advance_id: int
    employee_id: int
    company_id: int
    amount: Decimal
    advance_date: date
    reason: Optional[str] = None
    transaction_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "id": self.advance_id,
            "employeeId": self.employee_id,
            "amount": str(self.amount),
            "reason": self.reason,
            "date": self.advance_date.isoformat(),
            "transactionId": self.transaction_id,
        }
