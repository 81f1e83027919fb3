from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional

from ...common.datetime_utils import days_in_month, try_parse_iso_date
from ...common.numbers import as_amount, round2
from ...core.exceptions import ValidationError
from ..model import (
    DEFAULT_POLICY,
    DateValue,
    EmployeeExitProfile,
    LeaveBalanceSnapshot,
    SettlementBreakdown,
    SettlementDetails,
    SettlementPolicy,
    SettlementResult,
    SettlementSummary,
)
from .base import SettlementCalculator

logger = logging.getLogger(__name__)


class StandardSettlementCalculator(SettlementCalculator):
    """Standard full-and-final rule.

    Line items are rounded to 2 decimals first; gross is the sum of the
    rounded items and net is gross minus the rounded notice recovery.
    """

    def __init__(self, policy: Optional[SettlementPolicy] = None):
        self._policy = policy or DEFAULT_POLICY

    @property
    def policy(self) -> SettlementPolicy:
        return self._policy

    def calculate(
        self,
        profile: EmployeeExitProfile,
        exit_date: DateValue,
        leave_balance: Optional[LeaveBalanceSnapshot] = None,
    ) -> SettlementResult:
        policy = self._policy
        warnings: list[str] = []

        last_day = try_parse_iso_date(exit_date)
        if last_day is None:
            raise ValidationError(f"exit date {exit_date!r} is not a valid YYYY-MM-DD date")
        joined = try_parse_iso_date(profile.date_of_joining)
        annual_ctc = self._non_negative(profile.annual_ctc, "annual CTC", warnings)

        monthly_salary = annual_ctc / 12

        month_days = days_in_month(last_day.year, last_day.month)
        worked_days = last_day.day
        pro_rata_salary = round2((monthly_salary / month_days) * worked_days)

        unused_leaves = self._unused_leaves(leave_balance, warnings)
        daily_rate = monthly_salary / policy.encashment_divisor_days
        leave_encashment = round2(unused_leaves * daily_rate)

        actual_notice_days = self._notice_days(profile.resignation_date, last_day, warnings)
        shortfall_days = max(0, policy.notice_period_days - actual_notice_days)
        notice_period_recovery = round2(shortfall_days * daily_rate)

        pending_reimbursements = self._non_negative(
            profile.pending_reimbursements, "pending reimbursements", warnings
        )

        if joined is None:
            warnings.append(f"unparsable date of joining {profile.date_of_joining!r}; tenure set to 0")
            tenure_years = 0.0
        else:
            tenure_years = (last_day - joined).days / policy.days_per_year
        if tenure_years < 0:
            warnings.append(f"date of joining {joined.isoformat()} is after exit date; tenure set to 0")
            tenure_years = 0.0
        if tenure_years >= policy.gratuity_min_years:
            gratuity = round2(
                (monthly_salary * policy.gratuity_days_per_year * tenure_years)
                / policy.gratuity_working_days_per_month
            )
        else:
            gratuity = 0.0

        annual_bonus = self._non_negative(profile.annual_bonus, "annual bonus", warnings)
        months_worked = last_day.month
        pro_rated_bonus = round2((annual_bonus / 12) * months_worked)

        gross_amount = round2(
            pro_rata_salary + leave_encashment + gratuity + pro_rated_bonus + pending_reimbursements
        )
        net_settlement = round2(gross_amount - notice_period_recovery)

        if warnings:
            logger.warning(
                "Settlement for %s computed with defaults: %s",
                profile.employee_id or "<unknown>",
                "; ".join(warnings),
            )

        return SettlementResult(
            exit_date=last_day,
            breakdown=SettlementBreakdown(
                pro_rata_salary=pro_rata_salary,
                leave_encashment=leave_encashment,
                gratuity=gratuity,
                pro_rated_bonus=pro_rated_bonus,
                pending_reimbursements=pending_reimbursements,
                notice_period_recovery=notice_period_recovery,
            ),
            summary=SettlementSummary(
                gross_amount=gross_amount,
                total_deductions=notice_period_recovery,
                net_settlement=net_settlement,
            ),
            details=SettlementDetails(
                worked_days=worked_days,
                days_in_month=month_days,
                unused_leaves=unused_leaves,
                tenure_years=round2(tenure_years),
                notice_period_shortfall=shortfall_days,
            ),
            warnings=tuple(warnings),
        )

    def _unused_leaves(self, balance: Optional[LeaveBalanceSnapshot], warnings: list[str]) -> float:
        if balance is None:
            warnings.append("no leave balance supplied; unused leave taken as 0")
            return 0.0
        paid = self._non_negative(balance.paid_leave_available, "paid leave balance", warnings)
        casual = self._non_negative(balance.casual_leave_available, "casual leave balance", warnings)
        return paid + casual

    def _notice_days(self, resignation: Optional[DateValue], last_day: date, warnings: list[str]) -> int:
        full_notice = self._policy.notice_period_days
        if resignation is None or resignation == "":
            warnings.append("no resignation date; full notice period assumed served")
            return full_notice
        resigned = try_parse_iso_date(resignation)
        if resigned is None:
            warnings.append(f"unparsable resignation date {resignation!r}; full notice period assumed served")
            return full_notice
        return abs((last_day - resigned).days)

    @staticmethod
    def _non_negative(value: Any, label: str, warnings: list[str]) -> float:
        amount = as_amount(value, default=float("nan"))
        if amount != amount:
            warnings.append(f"missing or invalid {label} {value!r} replaced with 0")
            return 0.0
        if amount < 0:
            warnings.append(f"negative {label} {value!r} replaced with 0")
            return 0.0
        return round2(amount)
