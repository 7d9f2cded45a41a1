from __future__ import annotations

from decimal import Decimal, InvalidOperation
from enum import Enum

from .exceptions import ValidationError


class EmployeeStatus(str, Enum):
    """Employees are never deleted, only flipped to inactive."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"


class SalaryFrequency(str, Enum):
    """Informational only: the payroll formula treats both the same way."""

    DAILY = "Daily"
    MONTHLY = "Monthly"


class AttendanceStatus(str, Enum):
    """Daily attendance mark with its pay multiplier.

    Stored numerically in the database (0 / 1 / 1.5 / 2).
    """

    ABSENT = "Absent"
    PRESENT = "Present"
    OT_4_HRS = "OT4Hrs"
    OT_8_HRS = "OT8Hrs"

    @property
    def pay_multiplier(self) -> Decimal:
        return _MULTIPLIERS[self]

    @property
    def ot_hours(self) -> int:
        return _OT_HOURS[self]

    @classmethod
    def from_multiplier(cls, value) -> "AttendanceStatus":
        try:
            number = Decimal(str(value))
        except (InvalidOperation, ValueError):
            raise ValidationError(f"Invalid attendance status: {value!r}") from None
        for status, multiplier in _MULTIPLIERS.items():
            if multiplier == number:
                return status
        raise ValidationError(f"Invalid attendance status: {value!r}")

    @classmethod
    def parse(cls, value) -> "AttendanceStatus":
        """Accept a status, its label ("Present", "OT4Hrs", ...) or its multiplier."""

        if isinstance(value, AttendanceStatus):
            return value
        if isinstance(value, bool) or value is None:
            raise ValidationError(f"Invalid attendance status: {value!r}")
        if isinstance(value, str):
            label = value.strip()
            for status in cls:
                if status.value.lower() == label.lower():
                    return status
        return cls.from_multiplier(value)


_MULTIPLIERS = {
    AttendanceStatus.ABSENT: Decimal("0"),
    AttendanceStatus.PRESENT: Decimal("1"),
    AttendanceStatus.OT_4_HRS: Decimal("1.5"),
    AttendanceStatus.OT_8_HRS: Decimal("2"),
}

_OT_HOURS = {
    AttendanceStatus.ABSENT: 0,
    AttendanceStatus.PRESENT: 0,
    AttendanceStatus.OT_4_HRS: 4,
    AttendanceStatus.OT_8_HRS: 8,
}


class TransactionType(str, Enum):
    CASH_IN = "Cash-In"
    CASH_OUT = "Cash-Out"

    @classmethod
    def parse(cls, value: str) -> "TransactionType":
        """Ledger rows carry casing variants such as "Cash-out"."""

        key = (value or "").strip().lower()
        for t in cls:
            if t.value.lower() == key:
                return t
        raise ValidationError(f"Invalid transaction type: {value!r}")
