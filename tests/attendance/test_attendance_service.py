from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from typing import Optional

import pytest

from src.hr_engine.hr_engine.attendance.model import AttendanceRecord
from src.hr_engine.hr_engine.attendance.service import AttendanceService
from src.hr_engine.hr_engine.core.enums import AttendanceStatus
from src.hr_engine.hr_engine.core.exceptions import ValidationError
from src.hr_engine.hr_engine.shifts.model import ShiftRoster


class InMemoryAttendance:
    def __init__(self, records: list[AttendanceRecord]):
        self._records = records

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        for r in self._records:
            if r.employee_id == employee_id and r.work_date == work_date:
                return r
        return None

    def get_for_employee_between(self, employee_id: str, *, start_date: date, end_date: date):
        return [r for r in self._records if r.employee_id == employee_id and start_date <= r.work_date <= end_date]

    def get_report_rows(self, *, start_date: date, end_date: date, employee_id=None):
        return [
            r
            for r in self._records
            if start_date <= r.work_date <= end_date and (employee_id is None or r.employee_id == employee_id)
        ]


@dataclass
class InMemoryRosters:
    by_employee_date: dict[tuple[str, date], ShiftRoster] = field(default_factory=dict)
    by_employee: dict[str, ShiftRoster] = field(default_factory=dict)

    def get_for_employee_and_date(self, *, employee_id: str, work_date: date) -> Optional[ShiftRoster]:
        return self.by_employee_date.get((employee_id, work_date))

    def get_default_for_employee(self, employee_id: str) -> Optional[ShiftRoster]:
        return self.by_employee.get(employee_id)


def _rec(day: date, clock_in, clock_out, employee_id: str = "E1") -> AttendanceRecord:
    return AttendanceRecord(employee_id=employee_id, work_date=day, clock_in=clock_in, clock_out=clock_out)


JANUARY = [
    _rec(date(2024, 1, 2), "09:00", "17:00"),
    _rec(date(2024, 1, 3), "09:00", "13:30"),
    _rec(date(2024, 1, 4), "09:30", "19:30"),
    _rec(date(2024, 1, 5), None, None),
    _rec(date(2024, 2, 1), "09:00", "17:00"),
    _rec(date(2024, 1, 2), "09:00", "17:00", employee_id="E2"),
]


def test_monthly_summary_aggregates_classified_days():
    svc = AttendanceService(InMemoryAttendance(JANUARY))

    summary = svc.monthly_summary("E1", 2024, 1)

    assert summary.working_days == 2.5
    assert summary.work_hours == 22.5
    assert summary.overtime == 1.0
    assert summary.status_counts == {"Present": 1, "Half Day": 1, "Late": 1, "Absent": 1}
    assert summary.degraded_days == 0
    assert svc.monthly_working_days("E1", 2024, 1) == 2.5


def test_monthly_summary_counts_degraded_days():
    svc = AttendanceService(InMemoryAttendance([_rec(date(2024, 3, 4), "09:00", "??")]))

    summary = svc.monthly_summary("E1", 2024, 3)

    assert summary.working_days == 0
    assert summary.degraded_days == 1


def test_monthly_summary_rejects_bad_month():
    svc = AttendanceService(InMemoryAttendance([]))

    with pytest.raises(ValidationError):
        svc.monthly_summary("E1", 2024, 13)


def test_dated_roster_wins_over_employee_default():
    rosters = InMemoryRosters(
        by_employee_date={("E1", date(2024, 1, 4)): ShiftRoster(start_time=time(9, 30), shift_name="Late Start")},
        by_employee={"E1": ShiftRoster(start_time=time(8, 0), shift_name="Early")},
    )
    svc = AttendanceService(InMemoryAttendance(JANUARY), rosters)

    dated = svc.classify_day("E1", date(2024, 1, 4))
    default = svc.classify_day("E1", date(2024, 1, 2))

    assert dated.status == AttendanceStatus.PRESENT
    assert dated.rule_applied == "Roster: Late Start"
    assert default.status == AttendanceStatus.LATE
    assert default.rule_applied == "Roster: Early"


def test_day_without_record_is_absent():
    svc = AttendanceService(InMemoryAttendance(JANUARY))

    assert svc.classify_day("E1", date(2024, 1, 20)).status == AttendanceStatus.ABSENT


def test_classify_punches_uses_first_in_last_out():
    svc = AttendanceService(InMemoryAttendance([]))
    punches = [
        {"time": "09:05", "type": "IN"},
        {"time": "13:00", "type": "OUT"},
        {"time": "14:00", "type": "IN"},
        {"time": "18:15", "type": "OUT"},
    ]

    result = svc.classify_punches("E1", date(2024, 1, 8), punches)

    assert result.status == AttendanceStatus.PRESENT
    assert result.work_hours == 9.17
    assert result.working_days == 1.0
    assert result.overtime == 0.17
