from __future__ import annotations

from datetime import date

from src.hr_engine.hr_engine.attendance.model import AttendanceRecord
from src.hr_engine.hr_engine.payroll.model import EmployeeExitProfile
from src.hr_engine.hr_engine.payroll.salary_cycle import SalaryCycleConfig
from src.hr_engine.hr_engine.payroll.service import PayrollReportService


class FakeAttendanceRepo:
    def __init__(self, rows):
        self._rows = rows
        self.last_args = None

    def get_report_rows(self, *, start_date: date, end_date: date, employee_id=None):
        self.last_args = {
            "start_date": start_date,
            "end_date": end_date,
            "employee_id": employee_id,
        }
        return self._rows


def test_report_rows_and_summary():
    rows = [
        AttendanceRecord(employee_id="E1", work_date=date(2026, 1, 5), clock_in="09:00", clock_out="17:00"),
        AttendanceRecord(employee_id="E2", work_date=date(2026, 1, 5), clock_in="09:00", clock_out="19:30"),
        AttendanceRecord(employee_id="E1", work_date=date(2026, 1, 6), clock_in="09:40", clock_out="13:40"),
        AttendanceRecord(employee_id="E1", work_date=date(2026, 1, 7), clock_in=None, clock_out=None),
    ]

    svc = PayrollReportService(FakeAttendanceRepo(rows))
    report = svc.build_attendance_report(start=date(2026, 1, 1), end=date(2026, 1, 31))

    assert [r["status"] for r in report.rows] == ["Present", "Present", "Half Day", "Absent"]
    assert report.rows[3]["clock_in"] == "-"
    assert report.summary == [
        {"employee_id": "E1", "days": 3, "working_days": 1.5, "work_hours": 12.0, "overtime": 0.0},
        {"employee_id": "E2", "days": 1, "working_days": 1.0, "work_hours": 10.5, "overtime": 1.5},
    ]


def test_report_forwards_employee_filter():
    repo = FakeAttendanceRepo([])
    svc = PayrollReportService(repo)

    report = svc.build_monthly_report(year=2026, month=2, employee_id="E9")

    assert repo.last_args == {"start_date": date(2026, 2, 1), "end_date": date(2026, 2, 28), "employee_id": "E9"}
    assert report.summary == []


class FakeProfiles:
    def __init__(self, profiles):
        self._profiles = profiles

    def get_exit_profile(self, employee_id):
        return self._profiles.get(employee_id)


def test_summary_prices_overtime_with_salary_cycle():
    rows = [
        AttendanceRecord(employee_id="E1", work_date=date(2026, 1, 5), clock_in="09:00", clock_out="17:00"),
        AttendanceRecord(employee_id="E2", work_date=date(2026, 1, 5), clock_in="09:00", clock_out="19:30"),
    ]
    # monthly 19800 over 22 days x 9 hours is 100 an hour
    profiles = FakeProfiles({"E2": EmployeeExitProfile(annual_ctc=237_600, date_of_joining="2020-01-01")})

    default_cycle = PayrollReportService(FakeAttendanceRepo(rows), profiles=profiles)
    double_time = PayrollReportService(
        FakeAttendanceRepo(rows), profiles=profiles, salary_cycle=SalaryCycleConfig(overtime_multiplier=2.0)
    )

    summary = default_cycle.build_attendance_report(start=date(2026, 1, 1), end=date(2026, 1, 31)).summary
    assert [(s["employee_id"], s["overtime_pay"]) for s in summary] == [("E2", 225.0), ("E1", None)]

    summary = double_time.build_attendance_report(start=date(2026, 1, 1), end=date(2026, 1, 31)).summary
    assert summary[0]["overtime_pay"] == 300.0
