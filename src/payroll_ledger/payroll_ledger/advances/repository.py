from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import Advance


class AdvanceRepository(Protocol):
    def sum_in_range(self, employee_id: int, company_id: int, from_date: date, to_date: date) -> Decimal:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        company_id: int,
        amount: Decimal,
        advance_date: date,
        reason: Optional[str] = None,
        transaction_id: Optional[int] = None,
    ) -> Advance:
        raise NotImplementedError

    def get_by_id(self, company_id: int, advance_id: int) -> Optional[Advance]:
        raise NotImplementedError

    def delete(self, company_id: int, advance_id: int) -> bool:
        raise NotImplementedError

    def list_for_company(self, company_id: int, *, employee_id: Optional[int] = None) -> Sequence[Advance]:
        raise NotImplementedError
