from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol

from ..core.enums import TransactionType
from .model import Transaction


class TransactionRepository(Protocol):
    """Shared ledger: other flows write to it too, so never assume exclusive ownership."""

    def sum_by_category_in_range(self, category: str, company_id: int, from_date: date, to_date: date) -> Decimal:
        raise NotImplementedError

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
        raise NotImplementedError

    def delete(self, company_id: int, transaction_id: int) -> bool:
        raise NotImplementedError
