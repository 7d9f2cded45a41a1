from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Sequence

from ...attendance.model import AttendanceRecord
from ...employees.model import Employee


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def gross_salary(self, employee: Employee, records: Sequence[AttendanceRecord]) -> Decimal:
        raise NotImplementedError
