"""Pay-period helpers used alongside the attendance aggregates.

Weekdays follow ``date.weekday()``: Monday is 0, Sunday is 6.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable

from ..common.datetime_utils import DateLike, parse_iso_date
from ..common.numbers import round2
from ..core.constants import (
    DEFAULT_OVERTIME_MULTIPLIER,
    DEFAULT_WORKING_DAYS_PER_MONTH,
    DEFAULT_WORKING_HOURS_PER_DAY,
)
from ..core.exceptions import ValidationError

WEEKEND = (5, 6)


@dataclass(frozen=True)
class SalaryCycleConfig:
    working_days_per_month: int = DEFAULT_WORKING_DAYS_PER_MONTH
    working_hours_per_day: float = DEFAULT_WORKING_HOURS_PER_DAY
    overtime_multiplier: float = DEFAULT_OVERTIME_MULTIPLIER

    def validate(self) -> list[str]:
        errors = []
        if not 1 <= self.working_days_per_month <= 31:
            errors.append("Working days per month must be between 1 and 31")
        if not 1 <= self.working_hours_per_day <= 24:
            errors.append("Working hours per day must be between 1 and 24")
        if self.overtime_multiplier < 0:
            errors.append("Overtime multiplier must not be negative")
        return errors

    def ensure_valid(self) -> "SalaryCycleConfig":
        errors = self.validate()
        if errors:
            raise ValidationError("; ".join(errors))
        return self


DEFAULT_CYCLE_CONFIG = SalaryCycleConfig()


def working_days_in_cycle(
    start: DateLike,
    end: DateLike,
    *,
    holidays: Iterable[DateLike] = (),
    weekly_offs: Iterable[int] = WEEKEND,
) -> int:
    """Count days in [start, end] that are neither a weekly off nor a holiday."""
    first = parse_iso_date(start)
    last = parse_iso_date(end)
    skip_days = {parse_iso_date(h) for h in holidays}
    offs = set(weekly_offs)

    count = 0
    day = first
    while day <= last:
        if day.weekday() not in offs and day not in skip_days:
            count += 1
        day += timedelta(days=1)
    return count


def calculate_pro_rata_salary(base_salary: float, actual_working_days: float, total_working_days: float) -> float:
    if total_working_days == 0:
        return 0.0
    return round2(base_salary / total_working_days * actual_working_days)


def calculate_mid_cycle_salary(
    base_salary: float,
    *,
    cycle_start: DateLike,
    cycle_end: DateLike,
    active_from: DateLike,
    active_to: DateLike,
    holidays: Iterable[DateLike] = (),
) -> float:
    """Salary for an employee who joins or leaves inside a pay cycle."""
    start = max(parse_iso_date(cycle_start), parse_iso_date(active_from))
    end = min(parse_iso_date(cycle_end), parse_iso_date(active_to))
    if start > end:
        return 0.0

    holidays = list(holidays)
    total = working_days_in_cycle(cycle_start, cycle_end, holidays=holidays)
    actual = working_days_in_cycle(start, end, holidays=holidays)
    return calculate_pro_rata_salary(base_salary, actual, total)


def calculate_overtime_pay(
    base_salary: float,
    overtime_hours: float,
    config: SalaryCycleConfig = DEFAULT_CYCLE_CONFIG,
) -> float:
    config.ensure_valid()
    hourly_rate = base_salary / (config.working_days_per_month * config.working_hours_per_day)
    return round2(hourly_rate * max(0.0, overtime_hours) * config.overtime_multiplier)


def month_bounds(year: int, month: int) -> tuple[date, date]:
    first = date(year, month, 1)
    following = date(year + 1, 1, 1) if month == 12 else date(year, month + 1, 1)
    return first, following - timedelta(days=1)
