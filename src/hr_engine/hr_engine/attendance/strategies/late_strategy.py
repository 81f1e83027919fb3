from __future__ import annotations

from datetime import time

from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftRoster
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Late check-in."""

    def decide_checkin(self, *, clock_in: time, roster: ShiftRoster) -> StatusDecision:
        late_by = clock_in.hour * 60 + clock_in.minute - roster.start_minutes
        return StatusDecision(status=AttendanceStatus.LATE, note=f"late by {late_by} min")

    def decide_checkout(self, *, work_hours: float, roster: ShiftRoster, current: AttendanceStatus) -> StatusDecision:
        return StatusDecision(status=current, working_days=1.0)
