"""
Central configuration for the travel expense calculator.

All values are fixed constants; the tool reads no config files and no
environment variables. Rates (cents per km, catering allowances) live in the
report document itself.
"""

from datetime import date

DEFAULT_START_TIME = "00:00"
DEFAULT_END_TIME = "24:00"

# Any ordinary day without DST or timezone shifts works here.
REFERENCE_DAY = date(2024, 10, 19)

# Catering allowance thresholds, in whole hours
PARTIAL_DAY_THRESHOLD_HOURS = 8
FULL_DAY_HOURS = 24
