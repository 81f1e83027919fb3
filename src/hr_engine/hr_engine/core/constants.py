"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SHIFT_START = "09:00"
DEFAULT_FULL_DAY_HOURS = 8.0
DEFAULT_HALF_DAY_HOURS = 4.0
DEFAULT_GRACE_PERIOD_MINUTES = 15
# Overtime starts this many hours past a full day unless the roster says otherwise.
DEFAULT_OVERTIME_MARGIN_HOURS = 1.0

# IST
DEFAULT_UTC_OFFSET_MINUTES = 5 * 60 + 30

DEFAULT_NOTICE_PERIOD_DAYS = 30
DEFAULT_ENCASHMENT_DIVISOR_DAYS = 30
DEFAULT_GRATUITY_MIN_YEARS = 5.0
DEFAULT_GRATUITY_DAYS_PER_YEAR = 15
DEFAULT_GRATUITY_WORKING_DAYS_PER_MONTH = 26
DAYS_PER_YEAR = 365

DEFAULT_WORKING_DAYS_PER_MONTH = 22
DEFAULT_WORKING_HOURS_PER_DAY = 9
DEFAULT_OVERTIME_MULTIPLIER = 1.5

DEFAULT_RULE_NAME = "Standard Office"
