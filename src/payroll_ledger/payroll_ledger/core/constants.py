"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

from decimal import Decimal

SALARY_CATEGORY = "Salary"
SALARY_ADVANCE_CATEGORY = "Salary Advance"

MONEY_QUANT = Decimal("0.01")
# Largest value a DECIMAL(12, 2) column holds.
MONEY_MAX = Decimal("9999999999.99")

DEFAULT_PAYROLL_HISTORY_LIMIT = 500
