"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import ROUND_HALF_UP, Decimal

STANDARD_WORK_HOURS = 8
DEFAULT_OVERTIME_PREMIUM = Decimal("1.5")
DEFAULT_WORKING_DAYS_PER_MONTH = 22

AMOUNT_QUANTUM = Decimal("0.01")
AMOUNT_ROUNDING = ROUND_HALF_UP

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
