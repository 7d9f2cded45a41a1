from decimal import Decimal

import pytest

from src.payroll_ledger.payroll_ledger.core.enums import AttendanceStatus, TransactionType
from src.payroll_ledger.payroll_ledger.core.exceptions import ValidationError


@pytest.mark.parametrize(
    "status, multiplier, ot_hours",
    [
        (AttendanceStatus.ABSENT, Decimal("0"), 0),
        (AttendanceStatus.PRESENT, Decimal("1"), 0),
        (AttendanceStatus.OT_4_HRS, Decimal("1.5"), 4),
        (AttendanceStatus.OT_8_HRS, Decimal("2"), 8),
    ],
)
def test_status_accessors(status, multiplier, ot_hours):
    assert status.pay_multiplier == multiplier
    assert status.ot_hours == ot_hours


def test_from_multiplier_accepts_db_decimals():
    assert AttendanceStatus.from_multiplier(Decimal("1.5")) is AttendanceStatus.OT_4_HRS
    assert AttendanceStatus.from_multiplier(Decimal("2.0")) is AttendanceStatus.OT_8_HRS
    assert AttendanceStatus.from_multiplier(0) is AttendanceStatus.ABSENT


def test_parse_accepts_labels_and_numbers():
    assert AttendanceStatus.parse("Present") is AttendanceStatus.PRESENT
    assert AttendanceStatus.parse("ot8hrs") is AttendanceStatus.OT_8_HRS
    assert AttendanceStatus.parse(1.5) is AttendanceStatus.OT_4_HRS
    assert AttendanceStatus.parse("2") is AttendanceStatus.OT_8_HRS


@pytest.mark.parametrize("value", [None, True, 3, "Late", "", 0.5])
def test_parse_rejects_unknown(value):
    with pytest.raises(ValidationError):
        AttendanceStatus.parse(value)


def test_transaction_type_accepts_casing_variants():
    assert TransactionType.parse("Cash-out") is TransactionType.CASH_OUT
    assert TransactionType.parse("CASH-IN") is TransactionType.CASH_IN
    with pytest.raises(ValidationError):
        TransactionType.parse("Transfer")
