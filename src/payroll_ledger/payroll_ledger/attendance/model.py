from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance mark for one employee on one day."""

    attendance_id: int
    employee_id: int
    company_id: int
    work_date: date
    status: AttendanceStatus

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "employeeId": self.employee_id,
            "date": self.work_date.isoformat(),
            "status": self.status.value,
            "multiplier": str(self.status.pay_multiplier),
        }
