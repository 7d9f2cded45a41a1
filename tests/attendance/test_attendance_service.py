from __future__ import annotations

from datetime import date

import pytest

from src.payroll_ledger.payroll_ledger.core.enums import AttendanceStatus
from src.payroll_ledger.payroll_ledger.core.exceptions import NotFoundError, ValidationError

from conftest import COMPANY, OTHER_COMPANY

TODAY = date(2025, 12, 26)


def test_mark_upserts_one_record_per_day(world):
    world.employees.add(1, "Ali", 1000)
    svc = world.attendance_service()

    first = svc.mark(COMPANY, 1, TODAY, "Present", today=TODAY)
    second = svc.mark(COMPANY, 1, TODAY, 2, today=TODAY)

    assert first.attendance_id == second.attendance_id
    assert second.status is AttendanceStatus.OT_8_HRS
    assert len(svc.list_for_date(COMPANY, TODAY)) == 1


def test_future_dates_rejected(world):
    world.employees.add(1, "Ali", 1000)

    with pytest.raises(ValidationError):
        world.attendance_service().mark(COMPANY, 1, date(2025, 12, 27), "Present", today=TODAY)


def test_invalid_status_rejected(world):
    world.employees.add(1, "Ali", 1000)

    with pytest.raises(ValidationError):
        world.attendance_service().mark(COMPANY, 1, TODAY, "Late", today=TODAY)


def test_employee_must_belong_to_company(world):
    world.employees.add(1, "Elsewhere", 1000, company_id=OTHER_COMPANY)

    with pytest.raises(NotFoundError):
        world.attendance_service().mark(COMPANY, 1, TODAY, "Present", today=TODAY)


def test_list_in_range_is_inclusive(world):
    world.employees.add(1, "Ali", 1000)
    svc = world.attendance_service()
    for day in (22, 23, 24):
        svc.mark(COMPANY, 1, date(2025, 12, day), "Present", today=TODAY)

    records = svc.list_in_range(COMPANY, 1, date(2025, 12, 23), date(2025, 12, 24))

    assert [r.work_date.day for r in records] == [23, 24]
