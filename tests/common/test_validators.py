from datetime import date
from decimal import Decimal

import pytest

from src.payroll_ledger.payroll_ledger.common.datetime_utils import parse_iso_date
from src.payroll_ledger.payroll_ledger.common.validators import require_date_range, require_id, to_money
from src.payroll_ledger.payroll_ledger.core.exceptions import ValidationError


def test_to_money_avoids_float_noise():
    assert to_money(0.1) + to_money(0.2) == Decimal("0.30")
    assert to_money("2700") == Decimal("2700.00")


@pytest.mark.parametrize("value", [None, "", "abc", "NaN", True])
def test_to_money_rejects_garbage(value):
    with pytest.raises(ValidationError):
        to_money(value)


@pytest.mark.parametrize("value", ["1e30", "12345678901", "-10000000000", Decimal("1E+40")])
def test_to_money_rejects_amounts_beyond_the_column(value):
    with pytest.raises(ValidationError):
        to_money(value)


def test_to_money_accepts_the_column_maximum():
    assert to_money("9999999999.99") == Decimal("9999999999.99")


def test_negative_money_is_allowed():
    assert to_money("-150.5") == Decimal("-150.50")


def test_date_range_requires_both_ends():
    with pytest.raises(ValidationError):
        require_date_range(None, date(2025, 1, 1))
    with pytest.raises(ValidationError):
        require_date_range(date(2025, 1, 1), None)


def test_date_range_is_not_reordered():
    with pytest.raises(ValidationError):
        require_date_range(date(2025, 1, 7), date(2025, 1, 1))
    day = date(2025, 1, 1)
    assert require_date_range(day, day) == (day, day)


def test_require_id():
    assert require_id("5", "employeeId") == 5
    for bad in (None, 0, -1, "x"):
        with pytest.raises(ValidationError):
            require_id(bad, "employeeId")


def test_parse_iso_date():
    assert parse_iso_date("2025-12-25") == date(2025, 12, 25)
    with pytest.raises(ValidationError):
        parse_iso_date("25/12/2025")
