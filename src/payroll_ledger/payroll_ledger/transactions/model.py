from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.enums import TransactionType


@dataclass(frozen=True)
class Transaction:
    """Cash ledger entry. Payroll and advances only ever append Cash-Out rows."""

    transaction_id: int
    company_id: int
    account_id: int
    amount: Decimal
    category: str
    type: TransactionType
    transaction_date: date
    description: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.transaction_id,
            "accountId": self.account_id,
            "amount": str(self.amount),
            "category": self.category,
            "type": self.type.value,
            "date": self.transaction_date.isoformat(),
            "description": self.description,
        }
