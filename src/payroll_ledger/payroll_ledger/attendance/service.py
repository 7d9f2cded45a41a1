from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import today_local
from ..common.validators import require_date_range, require_id
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def mark(
        self,
        company_id: int,
        employee_id: int,
        work_date: Optional[date],
        status,
        *,
        today: Optional[date] = None,
    ) -> AttendanceRecord:
        """Create or overwrite the attendance mark for (employee, work_date)."""

        company_id = require_id(company_id, "companyId")
        employee_id = require_id(employee_id, "employeeId")
        if work_date is None:
            raise ValidationError("date is required")
        parsed = AttendanceStatus.parse(status)

        if work_date > (today or today_local()):
            raise ValidationError("Future date attendance is not allowed")

        if not self._employees.get_by_id(company_id, employee_id):
            raise NotFoundError("Employee not found")

        record = self._attendance.upsert(
            employee_id=employee_id,
            company_id=company_id,
            work_date=work_date,
            status=parsed,
        )
        logger.debug("Attendance %s marked %s for employee_id=%s", work_date, parsed.value, employee_id)
        return record

    def list_for_date(self, company_id: int, work_date: date) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_date(require_id(company_id, "companyId"), work_date)

    def list_in_range(
        self,
        company_id: int,
        employee_id: int,
        from_date: Optional[date],
        to_date: Optional[date],
    ) -> Sequence[AttendanceRecord]:
        from_date, to_date = require_date_range(from_date, to_date)
        return self._attendance.list_in_range(
            require_id(employee_id, "employeeId"),
            require_id(company_id, "companyId"),
            from_date,
            to_date,
        )
