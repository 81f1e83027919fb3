from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import days_in_month
from ..common.numbers import round2
from ..core.exceptions import ValidationError
from ..shifts.model import ShiftRoster
from ..shifts.repository import RosterRepository
from .classifier import AttendanceClassifier
from .model import AttendanceRecord, AttendanceResult
from .punches import PunchLike, first_in_last_out
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthlyAttendanceSummary:
    employee_id: str
    year: int
    month: int
    working_days: float
    work_hours: float
    overtime: float
    status_counts: dict[str, int] = field(default_factory=dict)
    degraded_days: int = 0


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        rosters: Optional[RosterRepository] = None,
        *,
        classifier: Optional[AttendanceClassifier] = None,
    ):
        self._attendance = attendance
        self._rosters = rosters
        self._classifier = classifier or AttendanceClassifier()

    def get_effective_roster(self, *, employee_id: str, work_date: date) -> ShiftRoster:
        if self._rosters:
            dated = self._rosters.get_for_employee_and_date(employee_id=employee_id, work_date=work_date)
            if dated:
                return dated
            default = self._rosters.get_default_for_employee(employee_id)
            if default:
                return default
        return self._classifier.default_roster

    def classify_record(self, record: AttendanceRecord) -> AttendanceResult:
        roster = self.get_effective_roster(employee_id=record.employee_id, work_date=record.work_date)
        return self._classifier.classify(record.clock_in, record.clock_out, record.work_date, roster)

    def classify_day(self, employee_id: str, work_date: date) -> AttendanceResult:
        record = self._attendance.get_for_employee_and_date(employee_id, work_date)
        if not record:
            record = AttendanceRecord(employee_id=employee_id, work_date=work_date, clock_in=None, clock_out=None)
        return self.classify_record(record)

    def classify_punches(self, employee_id: str, work_date: date, punches: Iterable[PunchLike]) -> AttendanceResult:
        """Classify a day from raw biometric punches (first IN, last OUT)."""
        first_in, last_out = first_in_last_out(list(punches))
        record = AttendanceRecord(employee_id=employee_id, work_date=work_date, clock_in=first_in, clock_out=last_out)
        return self.classify_record(record)

    def _month_records(self, employee_id: str, year: int, month: int) -> list[AttendanceRecord]:
        if not 1 <= month <= 12:
            raise ValidationError("month must be between 1 and 12")
        start = date(year, month, 1)
        end = date(year, month, days_in_month(year, month))
        rows = self._attendance.get_for_employee_between(employee_id, start_date=start, end_date=end)
        return [r for r in rows if start <= r.work_date <= end]

    def monthly_working_days(self, employee_id: str, year: int, month: int) -> float:
        return self.monthly_summary(employee_id, year, month).working_days

    def monthly_summary(self, employee_id: str, year: int, month: int) -> MonthlyAttendanceSummary:
        working_days = 0.0
        work_hours = 0.0
        overtime = 0.0
        counts: Counter[str] = Counter()
        degraded = 0

        for record in self._month_records(employee_id, year, month):
            result = self.classify_record(record)
            working_days += result.working_days
            work_hours += result.work_hours
            overtime += result.overtime
            counts[result.status.value] += 1
            if result.degraded:
                degraded += 1

        if degraded:
            logger.warning("%s: %d degraded attendance day(s) in %04d-%02d", employee_id, degraded, year, month)

        return MonthlyAttendanceSummary(
            employee_id=employee_id,
            year=year,
            month=month,
            working_days=working_days,
            work_hours=round2(work_hours),
            overtime=round2(overtime),
            status_counts=dict(counts),
            degraded_days=degraded,
        )
