from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_in_range(
        self,
        employee_id: int,
        company_id: int,
        from_date: date,
        to_date: date,
    ) -> Sequence[AttendanceRecord]:
        """Records with ``work_date`` in ``[from_date, to_date]``, both ends inclusive."""

        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def upsert(
        self,
        *,
        employee_id: int,
        company_id: int,
        work_date: date,
        status: AttendanceStatus,
    ) -> AttendanceRecord:
        raise NotImplementedError

    def list_for_date(self, company_id: int, work_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
