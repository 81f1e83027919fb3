from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import time
from typing import Optional

from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftRoster


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    working_days: float = 0.0
    note: Optional[str] = None


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide an attendance status."""

    @abstractmethod
    def decide_checkin(self, *, clock_in: time, roster: ShiftRoster) -> StatusDecision:
        raise NotImplementedError

    @abstractmethod
    def decide_checkout(self, *, work_hours: float, roster: ShiftRoster, current: AttendanceStatus) -> StatusDecision:
        raise NotImplementedError
