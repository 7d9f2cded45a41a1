from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import PayrollRecord


class PayrollRepository(Protocol):
    def find_by_period(
        self,
        employee_id: int,
        from_date: date,
        to_date: date,
        company_id: int,
    ) -> Optional[PayrollRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        account_id: int,
        company_id: int,
        from_date: date,
        to_date: date,
        amount: Decimal,
        remarks: Optional[str] = None,
    ) -> PayrollRecord:
        """Raise DuplicatePeriodError when the (employee, period, company) key already exists."""

        raise NotImplementedError

    def list_filtered(
        self,
        company_id: int,
        *,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
        employee_id: Optional[int] = None,
        account_id: Optional[int] = None,
        limit: int = 500,
    ) -> Sequence[PayrollRecord]:
        raise NotImplementedError
