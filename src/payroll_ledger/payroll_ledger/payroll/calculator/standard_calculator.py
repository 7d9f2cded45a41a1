from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from ...attendance.model import AttendanceRecord
from ...core.constants import MONEY_QUANT
from ...employees.model import Employee
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: sum of base_salary x attendance multiplier.

    Daily and Monthly employees are scaled the same way; base_salary is read as a
    per-attendance-unit rate.
    """

    def gross_salary(self, employee: Employee, records: Sequence[AttendanceRecord]) -> Decimal:
        total = sum(
            (employee.base_salary * r.status.pay_multiplier for r in records),
            Decimal("0"),
        )
        return total.quantize(MONEY_QUANT)
