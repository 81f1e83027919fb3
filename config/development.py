from .config import Config

SHIFT = {
    "startTime": Config.DEFAULT_SHIFT_START,
    "fullDayHours": Config.FULL_DAY_HOURS,
    "halfDayHours": Config.HALF_DAY_HOURS,
    "gracePeriodMinutes": Config.GRACE_PERIOD_MINUTES,
    "overtimeThreshold": Config.OVERTIME_THRESHOLD_HOURS,
}
UTC_OFFSET_MINUTES = Config.UTC_OFFSET_MINUTES

NOTICE_PERIOD_DAYS = Config.NOTICE_PERIOD_DAYS
GRATUITY_MIN_YEARS = Config.GRATUITY_MIN_YEARS

SALARY_CYCLE = {
    "working_days_per_month": Config.WORKING_DAYS_PER_MONTH,
    "working_hours_per_day": Config.WORKING_HOURS_PER_DAY,
    "overtime_multiplier": Config.OVERTIME_MULTIPLIER,
}

LOG_LEVEL = "DEBUG"
