import os


class Config:
    # Default shift roster
    DEFAULT_SHIFT_START = os.environ.get("DEFAULT_SHIFT_START", "09:00")
    FULL_DAY_HOURS = float(os.environ.get("FULL_DAY_HOURS", "8.0"))
    HALF_DAY_HOURS = float(os.environ.get("HALF_DAY_HOURS", "4.0"))
    GRACE_PERIOD_MINUTES = int(os.environ.get("GRACE_PERIOD_MINUTES", "15"))
    # Empty means full day + 1 hour
    OVERTIME_THRESHOLD_HOURS = os.environ.get("OVERTIME_THRESHOLD_HOURS") or None
    # IST
    UTC_OFFSET_MINUTES = int(os.environ.get("UTC_OFFSET_MINUTES", "330"))

    # Exit settlement
    NOTICE_PERIOD_DAYS = int(os.environ.get("NOTICE_PERIOD_DAYS", "30"))
    GRATUITY_MIN_YEARS = float(os.environ.get("GRATUITY_MIN_YEARS", "5"))

    # Salary cycle
    WORKING_DAYS_PER_MONTH = int(os.environ.get("WORKING_DAYS_PER_MONTH", "22"))
    WORKING_HOURS_PER_DAY = float(os.environ.get("WORKING_HOURS_PER_DAY", "9"))
    OVERTIME_MULTIPLIER = float(os.environ.get("OVERTIME_MULTIPLIER", "1.5"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
