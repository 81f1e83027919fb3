from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from ..core.enums import AttendanceStatus, PunchType


@dataclass(frozen=True)
class AttendanceInput:
    """One day's raw punches for one employee."""

    clock_in: Optional[str]
    clock_out: Optional[str]
    date: Optional[str] = None


@dataclass(frozen=True)
class AttendanceResult:
    """Classification output for one employee-day."""

    status: AttendanceStatus
    work_hours: float = 0.0
    working_days: float = 0.0
    overtime: float = 0.0
    rule_applied: Optional[str] = None
    warnings: tuple[str, ...] = ()
    notes: tuple[str, ...] = ()

    @property
    def degraded(self) -> bool:
        return bool(self.warnings)

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "workHours": self.work_hours,
            "workingDays": self.working_days,
            "overtime": self.overtime,
            "ruleApplied": self.rule_applied,
            "warnings": list(self.warnings),
            "notes": list(self.notes),
        }


@dataclass(frozen=True)
class AttendanceRecord:
    """Read-model of a stored attendance row, as supplied by the timekeeping store."""

    employee_id: str
    work_date: date
    clock_in: Optional[str]
    clock_out: Optional[str]


@dataclass(frozen=True)
class Punch:
    """Single biometric punch."""

    time: str
    kind: PunchType
