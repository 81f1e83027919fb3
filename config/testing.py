# Fixed rules so test runs do not depend on the developer's environment.
SHIFT = {
    "startTime": "09:00",
    "fullDayHours": 8.0,
    "halfDayHours": 4.0,
    "gracePeriodMinutes": 15,
    "overtimeThreshold": None,
}
UTC_OFFSET_MINUTES = 330

NOTICE_PERIOD_DAYS = 30
GRATUITY_MIN_YEARS = 5

SALARY_CYCLE = {
    "working_days_per_month": 22,
    "working_hours_per_day": 9,
    "overtime_multiplier": 1.5,
}

LOG_LEVEL = "WARNING"
