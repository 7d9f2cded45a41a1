from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Optional

from ..core.constants import MONEY_MAX, MONEY_QUANT
from ..core.exceptions import ValidationError


def require_id(value, field_name: str) -> int:
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field_name} is required")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is invalid") from None
    if number <= 0:
        raise ValidationError(f"{field_name} is invalid")
    return number


def require_date_range(from_date: Optional[date], to_date: Optional[date]) -> tuple[date, date]:
    if from_date is None or to_date is None:
        raise ValidationError("fromDate and toDate are required")
    if from_date > to_date:
        raise ValidationError("fromDate must not be after toDate")
    return from_date, to_date


def to_money(value, field_name: str = "amount") -> Decimal:
    """Coerce to a 2-place Decimal. Floats go through str() to avoid binary noise."""

    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field_name} is required")
    if isinstance(value, str) and not value.strip():
        raise ValidationError(f"{field_name} is required")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(f"{field_name} is invalid") from None
    if not amount.is_finite():
        raise ValidationError(f"{field_name} is invalid")
    try:
        amount = amount.quantize(MONEY_QUANT)
    except InvalidOperation:
        raise ValidationError(f"{field_name} is invalid") from None
    if abs(amount) > MONEY_MAX:
        raise ValidationError(f"{field_name} is too large")
    return amount


def require_positive_money(value, field_name: str = "amount") -> Decimal:
    amount = to_money(value, field_name)
    if amount <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return amount
