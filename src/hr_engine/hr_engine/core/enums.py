from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Daily attendance status as stored by the attendance collaborator."""

    PRESENT = "Present"
    LATE = "Late"
    HALF_DAY = "Half Day"
    LWP = "LWP"
    ABSENT = "Absent"


class PunchType(str, Enum):
    """Direction of a biometric punch."""

    IN = "IN"
    OUT = "OUT"
