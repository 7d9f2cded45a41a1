from datetime import date
from decimal import Decimal

from src.payroll_ledger.payroll_ledger.attendance.model import AttendanceRecord
from src.payroll_ledger.payroll_ledger.core.enums import AttendanceStatus, EmployeeStatus, SalaryFrequency
from src.payroll_ledger.payroll_ledger.employees.model import Employee
from src.payroll_ledger.payroll_ledger.payroll.calculator.standard_calculator import StandardPayrollCalculator


def _employee(salary: str, frequency: SalaryFrequency = SalaryFrequency.DAILY) -> Employee:
    return Employee(
        employee_id=1,
        company_id=1,
        name="A",
        status=EmployeeStatus.ACTIVE,
        base_salary=Decimal(salary),
        salary_frequency=frequency,
    )


def _records(*statuses: AttendanceStatus) -> list[AttendanceRecord]:
    return [
        AttendanceRecord(attendance_id=i, employee_id=1, company_id=1, work_date=date(2025, 1, i), status=s)
        for i, s in enumerate(statuses, start=1)
    ]


def test_standard_calculator_scales_base_by_multiplier():
    records = _records(
        AttendanceStatus.PRESENT,
        AttendanceStatus.PRESENT,
        AttendanceStatus.OT_4_HRS,
        AttendanceStatus.ABSENT,
    )

    calc = StandardPayrollCalculator()
    assert calc.gross_salary(_employee("500"), records) == Decimal("1750.00")


def test_no_records_means_zero_gross():
    assert StandardPayrollCalculator().gross_salary(_employee("500"), []) == Decimal("0.00")


def test_monthly_frequency_uses_same_per_unit_formula():
    records = _records(AttendanceStatus.PRESENT, AttendanceStatus.OT_8_HRS)

    calc = StandardPayrollCalculator()
    daily = calc.gross_salary(_employee("300", SalaryFrequency.DAILY), records)
    monthly = calc.gross_salary(_employee("300", SalaryFrequency.MONTHLY), records)
    assert daily == monthly == Decimal("900.00")


def test_fractional_rates_keep_cent_precision():
    records = _records(*([AttendanceStatus.OT_4_HRS] * 30))

    # 0.10 * 1.5 * 30 = 4.50 exactly; floats would drift.
    assert StandardPayrollCalculator().gross_salary(_employee("0.10"), records) == Decimal("4.50")
