from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..core.enums import EmployeeStatus, SalaryFrequency


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee or partner on a company's roster.

    ``base_salary`` is used as a per-attendance-unit rate whatever the frequency.
    """

    employee_id: int
    company_id: int
    name: str
    status: EmployeeStatus
    base_salary: Decimal
    salary_frequency: SalaryFrequency = SalaryFrequency.DAILY

    @property
    def is_active(self) -> bool:
        return self.status is EmployeeStatus.ACTIVE
