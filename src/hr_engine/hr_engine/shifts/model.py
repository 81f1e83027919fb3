from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import time, timedelta
from typing import Any, Mapping, Optional

from ..common.datetime_utils import minutes_since_midnight, try_parse_clock_time
from ..common.numbers import as_amount
from ..common.validators import require_non_negative, require_positive
from ..core.constants import (
    DEFAULT_FULL_DAY_HOURS,
    DEFAULT_GRACE_PERIOD_MINUTES,
    DEFAULT_HALF_DAY_HOURS,
    DEFAULT_OVERTIME_MARGIN_HOURS,
    DEFAULT_SHIFT_START,
    DEFAULT_UTC_OFFSET_MINUTES,
)
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class ShiftRoster:
    """Domain entity: business rules of one shift.

    Passed by value into every classification call, so tests can build any
    variant without touching shared state.
    """

    start_time: time = time.fromisoformat(DEFAULT_SHIFT_START)
    full_day_hours: float = DEFAULT_FULL_DAY_HOURS
    half_day_hours: float = DEFAULT_HALF_DAY_HOURS
    grace_period_minutes: int = DEFAULT_GRACE_PERIOD_MINUTES
    overtime_threshold_hours: Optional[float] = None
    shift_name: Optional[str] = None
    utc_offset: timedelta = field(default=timedelta(minutes=DEFAULT_UTC_OFFSET_MINUTES))

    def __post_init__(self) -> None:
        require_positive(self.full_day_hours, "full_day_hours")
        require_non_negative(self.half_day_hours, "half_day_hours")
        require_non_negative(self.grace_period_minutes, "grace_period_minutes")
        if self.half_day_hours > self.full_day_hours:
            raise ValidationError("half_day_hours must not exceed full_day_hours")
        if self.overtime_threshold_hours is not None:
            require_non_negative(self.overtime_threshold_hours, "overtime_threshold_hours")

    @property
    def start_minutes(self) -> int:
        return minutes_since_midnight(self.start_time)

    @property
    def effective_overtime_threshold(self) -> float:
        if self.overtime_threshold_hours is not None:
            return self.overtime_threshold_hours
        return self.full_day_hours + DEFAULT_OVERTIME_MARGIN_HOURS

    def with_overrides(self, **changes: Any) -> "ShiftRoster":
        return replace(self, **changes)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, base: Optional["ShiftRoster"] = None) -> "ShiftRoster":
        """Build a roster from a collaborator document (camelCase keys).

        Missing, zero or unparsable values fall back to ``base`` (the default
        roster when not given), matching how roster documents are filled in
        by the admin screens.
        """
        base = base or DEFAULT_ROSTER

        start = try_parse_clock_time(data.get("startTime") or data.get("start_time")) or base.start_time
        full_day = _positive(data.get("fullDayHours") or data.get("full_day_hours")) or base.full_day_hours
        half_day = _positive(data.get("halfDayHours") or data.get("half_day_hours")) or base.half_day_hours
        grace = (
            data.get("gracePeriod")
            or data.get("gracePeriodMinutes")
            or data.get("gracePeriodMins")
            or data.get("grace_period_minutes")
        )
        grace_minutes = int(_positive(grace)) or base.grace_period_minutes
        overtime = _positive(data.get("overtimeThreshold") or data.get("overtime_threshold_hours")) or None
        name = data.get("shiftName") or data.get("shift_name") or base.shift_name

        if half_day > full_day:
            half_day = min(base.half_day_hours, full_day)

        return cls(
            start_time=start,
            full_day_hours=full_day,
            half_day_hours=half_day,
            grace_period_minutes=grace_minutes,
            overtime_threshold_hours=overtime if overtime is not None else base.overtime_threshold_hours,
            shift_name=name,
            utc_offset=base.utc_offset,
        )


def _positive(value: Any) -> float:
    number = as_amount(value)
    return number if number > 0 else 0.0


DEFAULT_ROSTER = ShiftRoster()
