from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import now_utc
from .calculator.standard_settlement import StandardSettlementCalculator
from .model import (
    DateValue,
    EmployeeExitProfile,
    LeaveBalanceSnapshot,
    SettlementReport,
    SettlementResult,
)

_DEFAULT_CALCULATOR = StandardSettlementCalculator()


def calculate_final_settlement(
    profile: EmployeeExitProfile,
    exit_date: DateValue,
    leave_balance: Optional[LeaveBalanceSnapshot] = None,
) -> SettlementResult:
    """Full-and-final settlement with the default policy."""
    return _DEFAULT_CALCULATOR.calculate(profile, exit_date, leave_balance)


def generate_settlement_report(
    profile: EmployeeExitProfile,
    settlement: SettlementResult,
    *,
    generated_at: Optional[datetime] = None,
) -> SettlementReport:
    """Wrap a computed settlement with the employee's identity fields. No recomputation."""
    joining = profile.date_of_joining
    if isinstance(joining, date):
        joining = joining.isoformat()

    return SettlementReport(
        employee_id=profile.employee_id,
        employee_name=profile.name,
        department=profile.department,
        designation=profile.designation,
        joining_date=joining,
        exit_date=settlement.exit_date.isoformat(),
        tenure=f"{settlement.details.tenure_years:g} years",
        breakdown=settlement.breakdown,
        summary=settlement.summary,
        generated_at=generated_at or now_utc(),
        warnings=settlement.warnings,
    )
