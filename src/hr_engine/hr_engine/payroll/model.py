from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, Optional, Union

from ..common.numbers import as_amount
from ..common.validators import require_non_negative, require_positive
from ..core.constants import (
    DAYS_PER_YEAR,
    DEFAULT_ENCASHMENT_DIVISOR_DAYS,
    DEFAULT_GRATUITY_DAYS_PER_YEAR,
    DEFAULT_GRATUITY_MIN_YEARS,
    DEFAULT_GRATUITY_WORKING_DAYS_PER_MONTH,
    DEFAULT_NOTICE_PERIOD_DAYS,
)

DateValue = Union[str, date]


@dataclass(frozen=True)
class SettlementPolicy:
    """Statutory and contractual constants of the exit settlement."""

    notice_period_days: int = DEFAULT_NOTICE_PERIOD_DAYS
    encashment_divisor_days: int = DEFAULT_ENCASHMENT_DIVISOR_DAYS
    gratuity_min_years: float = DEFAULT_GRATUITY_MIN_YEARS
    gratuity_days_per_year: int = DEFAULT_GRATUITY_DAYS_PER_YEAR
    gratuity_working_days_per_month: int = DEFAULT_GRATUITY_WORKING_DAYS_PER_MONTH
    days_per_year: int = DAYS_PER_YEAR

    def __post_init__(self) -> None:
        require_non_negative(self.notice_period_days, "notice_period_days")
        require_positive(self.encashment_divisor_days, "encashment_divisor_days")
        require_non_negative(self.gratuity_min_years, "gratuity_min_years")
        require_non_negative(self.gratuity_days_per_year, "gratuity_days_per_year")
        require_positive(self.gratuity_working_days_per_month, "gratuity_working_days_per_month")
        require_positive(self.days_per_year, "days_per_year")


DEFAULT_POLICY = SettlementPolicy()


@dataclass(frozen=True)
class EmployeeExitProfile:
    """Compensation and tenure facts of an exiting employee (HR profile store)."""

    annual_ctc: float
    date_of_joining: Optional[DateValue]
    resignation_date: Optional[DateValue] = None
    pending_reimbursements: float = 0.0
    annual_bonus: float = 0.0
    employee_id: Optional[str] = None
    name: Optional[str] = None
    department: Optional[str] = None
    designation: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "EmployeeExitProfile":
        employee_id = data.get("employeeId") or data.get("id") or data.get("uid")
        return cls(
            annual_ctc=as_amount(data.get("annualCTC", data.get("ctc"))),
            date_of_joining=data.get("dateOfJoining") or data.get("joiningDate"),
            resignation_date=data.get("resignationDate") or None,
            pending_reimbursements=as_amount(data.get("pendingReimbursements")),
            annual_bonus=as_amount(data.get("annualBonus")),
            employee_id=str(employee_id) if employee_id is not None else None,
            name=data.get("name"),
            department=data.get("department"),
            designation=data.get("designation"),
        )


@dataclass(frozen=True)
class LeaveBalanceSnapshot:
    """Unused leave days at exit (leave ledger)."""

    paid_leave_available: float = 0.0
    casual_leave_available: float = 0.0

    @property
    def total(self) -> float:
        return self.paid_leave_available + self.casual_leave_available

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "LeaveBalanceSnapshot":
        """Accepts the ledger shape ``{"paidLeave": {"available": n}, ...}`` or flat keys."""
        if not data:
            return cls()

        def _available(nested_key: str, flat_key: str) -> float:
            nested = data.get(nested_key)
            if isinstance(nested, Mapping):
                return as_amount(nested.get("available"))
            return as_amount(data.get(flat_key))

        return cls(
            paid_leave_available=_available("paidLeave", "paidLeaveAvailable"),
            casual_leave_available=_available("casualLeave", "casualLeaveAvailable"),
        )


@dataclass(frozen=True)
class SettlementBreakdown:
    pro_rata_salary: float
    leave_encashment: float
    gratuity: float
    pro_rated_bonus: float
    pending_reimbursements: float
    notice_period_recovery: float

    def to_dict(self) -> dict[str, float]:
        return {
            "proRataSalary": self.pro_rata_salary,
            "leaveEncashment": self.leave_encashment,
            "gratuity": self.gratuity,
            "proRatedBonus": self.pro_rated_bonus,
            "pendingReimbursements": self.pending_reimbursements,
            "noticePeriodRecovery": self.notice_period_recovery,
        }


@dataclass(frozen=True)
class SettlementSummary:
    gross_amount: float
    total_deductions: float
    net_settlement: float

    def to_dict(self) -> dict[str, float]:
        return {
            "grossAmount": self.gross_amount,
            "totalDeductions": self.total_deductions,
            "netSettlement": self.net_settlement,
        }


@dataclass(frozen=True)
class SettlementDetails:
    worked_days: int
    days_in_month: int
    unused_leaves: float
    tenure_years: float
    notice_period_shortfall: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "workedDays": self.worked_days,
            "daysInMonth": self.days_in_month,
            "unusedLeaves": self.unused_leaves,
            "tenureYears": self.tenure_years,
            "noticePeriodShortfall": self.notice_period_shortfall,
        }


@dataclass(frozen=True)
class SettlementResult:
    exit_date: date
    breakdown: SettlementBreakdown
    summary: SettlementSummary
    details: SettlementDetails
    warnings: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "exitDate": self.exit_date.isoformat(),
            "breakdown": self.breakdown.to_dict(),
            "summary": self.summary.to_dict(),
            "details": self.details.to_dict(),
            "warnings": list(self.warnings),
        }


@dataclass(frozen=True)
class SettlementReport:
    """Presentation view of a settlement for the document/report layer."""

    employee_id: Optional[str]
    employee_name: Optional[str]
    department: Optional[str]
    designation: Optional[str]
    joining_date: Optional[str]
    exit_date: str
    tenure: str
    breakdown: SettlementBreakdown
    summary: SettlementSummary
    generated_at: datetime
    warnings: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "department": self.department,
            "designation": self.designation,
            "joiningDate": self.joining_date,
            "exitDate": self.exit_date,
            "tenure": self.tenure,
            "breakdown": self.breakdown.to_dict(),
            "summary": self.summary.to_dict(),
            "generatedAt": self.generated_at.isoformat(),
            "warnings": list(self.warnings),
        }
