from __future__ import annotations

from datetime import time

from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftRoster
from .base import AttendanceStrategy, StatusDecision


class HalfDayStrategy(AttendanceStrategy):
    """Between the half-day and full-day thresholds on check-out (overrides Late)."""

    def decide_checkin(self, *, clock_in: time, roster: ShiftRoster) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT)

    def decide_checkout(self, *, work_hours: float, roster: ShiftRoster, current: AttendanceStatus) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.HALF_DAY, working_days=0.5)
