from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from ..common.datetime_utils import minutes_since_midnight
from ..shifts.model import ShiftRoster
from .strategies.base import AttendanceStrategy
from .strategies.half_day_strategy import HalfDayStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.lwp_strategy import LeaveWithoutPayStrategy
from .strategies.normal_strategy import NormalStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_checkin(self, *, clock_in: time, roster: ShiftRoster) -> AttendanceStrategy:
        if minutes_since_midnight(clock_in) <= roster.start_minutes + roster.grace_period_minutes:
            return NormalStrategy()
        return LateStrategy()

    def for_checkout(self, *, work_hours: float, roster: ShiftRoster) -> AttendanceStrategy:
        if work_hours < roster.half_day_hours:
            return LeaveWithoutPayStrategy()
        if work_hours < roster.full_day_hours:
            return HalfDayStrategy()
        return NormalStrategy()
