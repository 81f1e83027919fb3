from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional

import pandas as pd

from ..attendance.repository import AttendanceRepository
from ..attendance.service import AttendanceService
from ..common.numbers import as_amount, round2
from ..core.exceptions import DomainError, NotFoundError
from .calculator.base import SettlementCalculator
from .calculator.standard_settlement import StandardSettlementCalculator
from .model import DateValue, SettlementReport
from .repository import EmployeeProfileRepository, LeaveLedgerRepository
from .salary_cycle import DEFAULT_CYCLE_CONFIG, SalaryCycleConfig, calculate_overtime_pay, month_bounds
from .settlement import generate_settlement_report

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = ["employee_id", "days", "working_days", "work_hours", "overtime"]


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]


class PayrollReportService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        attendance_service: Optional[AttendanceService] = None,
        profiles: Optional[EmployeeProfileRepository] = None,
        salary_cycle: SalaryCycleConfig = DEFAULT_CYCLE_CONFIG,
    ):
        self._attendance = attendance
        self._service = attendance_service or AttendanceService(attendance)
        self._profiles = profiles
        self._salary_cycle = salary_cycle.ensure_valid()

    @property
    def salary_cycle(self) -> SalaryCycleConfig:
        return self._salary_cycle

    def build_attendance_report(
        self,
        *,
        start: date,
        end: date,
        employee_id: Optional[str] = None,
    ) -> ReportData:
        query_rows = self._attendance.get_report_rows(start_date=start, end_date=end, employee_id=employee_id)

        out_rows: list[dict] = []
        for r in query_rows:
            result = self._service.classify_record(r)
            out_rows.append(
                {
                    "employee_id": r.employee_id,
                    "work_date": r.work_date.strftime("%Y-%m-%d"),
                    "clock_in": r.clock_in or "-",
                    "clock_out": r.clock_out or "-",
                    "status": result.status.value,
                    "work_hours": result.work_hours,
                    "working_days": result.working_days,
                    "overtime": result.overtime,
                    "rule_applied": result.rule_applied,
                    "warnings": "; ".join(result.warnings),
                }
            )

        return ReportData(rows=out_rows, summary=self._summarize(out_rows))

    def build_monthly_report(self, *, year: int, month: int, employee_id: Optional[str] = None) -> ReportData:
        start, end = month_bounds(year, month)
        return self.build_attendance_report(start=start, end=end, employee_id=employee_id)

    def _summarize(self, rows: list[dict]) -> list[dict]:
        if not rows:
            return []

        df = pd.DataFrame(rows)
        grouped = (
            df.groupby("employee_id", sort=False)
            .agg(
                days=("work_date", "count"),
                working_days=("working_days", "sum"),
                work_hours=("work_hours", "sum"),
                overtime=("overtime", "sum"),
            )
            .reset_index()
            .sort_values("work_hours", ascending=False, kind="stable")
        )

        summary = []
        for rec in grouped[SUMMARY_COLUMNS].to_dict(orient="records"):
            summary.append(
                {
                    "employee_id": rec["employee_id"],
                    "days": int(rec["days"]),
                    "working_days": float(rec["working_days"]),
                    "work_hours": round2(rec["work_hours"]),
                    "overtime": round2(rec["overtime"]),
                }
            )
        if self._profiles is not None:
            for rec in summary:
                rec["overtime_pay"] = self._overtime_pay(rec["employee_id"], rec["overtime"])
        return summary

    def _overtime_pay(self, employee_id: str, overtime_hours: float) -> Optional[float]:
        profile = self._profiles.get_exit_profile(employee_id)
        if profile is None:
            logger.warning("No profile for %s; overtime pay left blank", employee_id)
            return None
        monthly_salary = as_amount(profile.annual_ctc) / 12
        return calculate_overtime_pay(monthly_salary, overtime_hours, self._salary_cycle)


@dataclass(frozen=True)
class BatchSettlement:
    reports: list[SettlementReport] = field(default_factory=list)
    failures: dict[str, str] = field(default_factory=dict)


class SettlementService:
    def __init__(
        self,
        profiles: EmployeeProfileRepository,
        leave_ledger: Optional[LeaveLedgerRepository] = None,
        *,
        calculator: Optional[SettlementCalculator] = None,
    ):
        self._profiles = profiles
        self._leave_ledger = leave_ledger
        self._calculator = calculator or StandardSettlementCalculator()

    def settle(self, employee_id: str, exit_date: DateValue) -> SettlementReport:
        profile = self._profiles.get_exit_profile(employee_id)
        if not profile:
            raise NotFoundError(f"employee {employee_id} not found")

        balance = self._leave_ledger.get_balance(employee_id) if self._leave_ledger else None
        settlement = self._calculator.calculate(profile, exit_date, balance)
        logger.info(
            "Settlement for %s on %s: net %.2f",
            employee_id,
            settlement.exit_date.isoformat(),
            settlement.summary.net_settlement,
        )
        return generate_settlement_report(profile, settlement)

    def settle_many(self, exits: Iterable[tuple[str, DateValue]]) -> BatchSettlement:
        """Settle several exits; one bad record never stops the batch."""
        batch = BatchSettlement()
        for employee_id, exit_date in exits:
            try:
                batch.reports.append(self.settle(employee_id, exit_date))
            except DomainError as exc:
                logger.error("Settlement for %s failed: %s", employee_id, exc)
                batch.failures[employee_id] = str(exc)
        return batch
