from __future__ import annotations

from datetime import time

from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftRoster
from .base import AttendanceStrategy, StatusDecision


class LeaveWithoutPayStrategy(AttendanceStrategy):
    """Fewer hours than a half day: the day is unpaid."""

    def decide_checkin(self, *, clock_in: time, roster: ShiftRoster) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT)

    def decide_checkout(self, *, work_hours: float, roster: ShiftRoster, current: AttendanceStatus) -> StatusDecision:
        return StatusDecision(
            status=AttendanceStatus.LWP,
            working_days=0.0,
            note=f"{work_hours:.2f}h below half day ({roster.half_day_hours:g}h)",
        )
