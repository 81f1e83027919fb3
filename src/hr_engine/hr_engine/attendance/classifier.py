"""Daily attendance classification.

A day is classified on its own: clock-in decides on-time vs late against the
roster start plus grace, the worked duration decides the paid-day tier, and
anything past the overtime threshold is overtime. Durations are measured
between timezone-aware datetimes in the roster's fixed UTC offset, with a
clock-out earlier than the clock-in treated as the next calendar day.

Classification never raises. Inputs that cannot be parsed degrade to zero
hours (or to on-time, for lateness) and are reported in
``AttendanceResult.warnings``.
"""

from __future__ import annotations

import logging
from datetime import date, time, timedelta, timezone
from typing import Optional, Union

from ..common.datetime_utils import (
    at_offset,
    try_parse_clock_time,
    try_parse_iso_date,
)
from ..common.numbers import round2
from ..core.constants import DEFAULT_RULE_NAME
from ..core.enums import AttendanceStatus
from ..shifts.model import DEFAULT_ROSTER, ShiftRoster
from .factory import AttendanceStrategyFactory
from .model import AttendanceInput, AttendanceResult

logger = logging.getLogger(__name__)

# Stand-in day when the caller gives none; with a fixed offset only the
# time of day affects a duration.
NOMINAL_DATE = date(2024, 1, 1)

ClockValue = Optional[Union[str, time]]
DateValue = Optional[Union[str, date]]


class AttendanceClassifier:
    def __init__(
        self,
        *,
        default_roster: Optional[ShiftRoster] = None,
        strategy_factory: Optional[AttendanceStrategyFactory] = None,
    ):
        self._default_roster = default_roster or DEFAULT_ROSTER
        self._factory = strategy_factory or AttendanceStrategyFactory()

    @property
    def default_roster(self) -> ShiftRoster:
        return self._default_roster

    def classify_input(self, item: AttendanceInput, roster: Optional[ShiftRoster] = None) -> AttendanceResult:
        return self.classify(item.clock_in, item.clock_out, item.date, roster)

    def classify(
        self,
        clock_in: ClockValue,
        clock_out: ClockValue,
        work_date: DateValue = None,
        roster: Optional[ShiftRoster] = None,
    ) -> AttendanceResult:
        rule = roster or self._default_roster
        rule_applied = f"Roster: {rule.shift_name}" if rule.shift_name else DEFAULT_RULE_NAME

        if _is_blank(clock_in):
            return AttendanceResult(status=AttendanceStatus.ABSENT, rule_applied=rule_applied)

        warnings: list[str] = []
        notes: list[str] = []

        in_time = try_parse_clock_time(clock_in)
        if in_time is None:
            warnings.append(f"unparsable clock-in {clock_in!r}; lateness not evaluated")
            status = AttendanceStatus.PRESENT
        else:
            strategy = self._factory.for_checkin(clock_in=in_time, roster=rule)
            checkin = strategy.decide_checkin(clock_in=in_time, roster=rule)
            status = checkin.status
            if checkin.note:
                notes.append(checkin.note)

        if _is_blank(clock_out):
            # Open shift: nothing to credit until the clock-out arrives.
            return self._finish(status, 0.0, 0.0, 0.0, rule_applied, warnings, notes, work_date)

        work_hours = self._work_hours(in_time, clock_out, work_date, rule, warnings)

        strategy = self._factory.for_checkout(work_hours=work_hours, roster=rule)
        decision = strategy.decide_checkout(work_hours=work_hours, roster=rule, current=status)
        if decision.note:
            notes.append(decision.note)

        overtime = max(0.0, round2(work_hours - rule.effective_overtime_threshold))
        return self._finish(
            decision.status, work_hours, decision.working_days, overtime, rule_applied, warnings, notes, work_date
        )

    def _work_hours(
        self,
        in_time: Optional[time],
        clock_out: ClockValue,
        work_date: DateValue,
        rule: ShiftRoster,
        warnings: list[str],
    ) -> float:
        out_time = try_parse_clock_time(clock_out)
        if out_time is None:
            warnings.append(f"unparsable clock-out {clock_out!r}; work hours set to 0")
        if _is_blank(work_date):
            day: Optional[date] = NOMINAL_DATE
        else:
            day = try_parse_iso_date(work_date)
            if day is None:
                warnings.append(f"unparsable date {work_date!r}; work hours set to 0")
        if in_time is None or out_time is None or day is None:
            return 0.0

        tz = timezone(rule.utc_offset)
        start = at_offset(day, in_time, tz)
        out_day = day + timedelta(days=1) if out_time < in_time else day
        end = at_offset(out_day, out_time, tz)

        hours = round2((end - start).total_seconds() / 3600)
        return max(0.0, hours)

    @staticmethod
    def _finish(
        status: AttendanceStatus,
        work_hours: float,
        working_days: float,
        overtime: float,
        rule_applied: str,
        warnings: list[str],
        notes: list[str],
        work_date: DateValue,
    ) -> AttendanceResult:
        if warnings:
            logger.warning("Degraded attendance input (date=%s): %s", work_date, "; ".join(warnings))
        return AttendanceResult(
            status=status,
            work_hours=work_hours,
            working_days=working_days,
            overtime=overtime,
            rule_applied=rule_applied,
            warnings=tuple(warnings),
            notes=tuple(notes),
        )


def _is_blank(value: object) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


_DEFAULT_CLASSIFIER = AttendanceClassifier()


def classify_attendance(
    clock_in: ClockValue,
    clock_out: ClockValue,
    date: DateValue = None,
    roster: Optional[ShiftRoster] = None,
) -> AttendanceResult:
    """Classify one employee-day with ``roster`` (default rules when omitted)."""
    return _DEFAULT_CLASSIFIER.classify(clock_in, clock_out, date, roster)
