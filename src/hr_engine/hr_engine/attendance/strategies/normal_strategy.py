from __future__ import annotations

from datetime import time

from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftRoster
from .base import AttendanceStrategy, StatusDecision


class NormalStrategy(AttendanceStrategy):
    """On-time check-in; a full day on check-out keeps the check-in status."""

    def decide_checkin(self, *, clock_in: time, roster: ShiftRoster) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT)

    def decide_checkout(self, *, work_hours: float, roster: ShiftRoster, current: AttendanceStatus) -> StatusDecision:
        return StatusDecision(status=current, working_days=1.0)
