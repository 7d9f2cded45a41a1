"""Example: use the service layer directly (without Flask).

Controllers are a thin layer; the payroll rules live in PayrollService.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.payroll_ledger.payroll_ledger.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    rows = container.payroll_service.compute_preview(1, date(2025, 12, 22), date(2025, 12, 28))
    for row in rows:
        print(row.employee_name, row.days_worked, row.ot_hours, row.gross_salary, row.net_balance)


if __name__ == "__main__":
    main()
