from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.classifier import AttendanceClassifier
from .attendance.factory import AttendanceStrategyFactory
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.logging_utils import configure_logging
from .payroll.calculator.standard_settlement import StandardSettlementCalculator
from .payroll.repository import EmployeeProfileRepository, LeaveLedgerRepository
from .payroll.service import PayrollReportService, SettlementService
from .settings import EngineSettings, load_settings
from .shifts.repository import RosterRepository


@dataclass(frozen=True)
class Container:
    settings: EngineSettings

    classifier: AttendanceClassifier
    settlement_calculator: StandardSettlementCalculator

    attendance_service: AttendanceService
    payroll_report_service: PayrollReportService
    settlement_service: SettlementService


def build_container(
    *,
    attendance_repo: AttendanceRepository,
    profiles_repo: EmployeeProfileRepository,
    rosters_repo: Optional[RosterRepository] = None,
    leave_ledger_repo: Optional[LeaveLedgerRepository] = None,
    settings: Optional[EngineSettings] = None,
) -> Container:
    """Wire the services over the collaborator repositories supplied by the host app."""
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    classifier = AttendanceClassifier(
        default_roster=settings.default_roster,
        strategy_factory=AttendanceStrategyFactory(),
    )
    settlement_calculator = StandardSettlementCalculator(settings.settlement_policy)

    attendance_service = AttendanceService(attendance_repo, rosters_repo, classifier=classifier)
    payroll_report_service = PayrollReportService(
        attendance_repo,
        attendance_service=attendance_service,
        profiles=profiles_repo,
        salary_cycle=settings.salary_cycle,
    )
    settlement_service = SettlementService(profiles_repo, leave_ledger_repo, calculator=settlement_calculator)

    return Container(
        settings=settings,
        classifier=classifier,
        settlement_calculator=settlement_calculator,
        attendance_service=attendance_service,
        payroll_report_service=payroll_report_service,
        settlement_service=settlement_service,
    )
