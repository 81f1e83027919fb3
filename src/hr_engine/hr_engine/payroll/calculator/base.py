from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..model import DateValue, EmployeeExitProfile, LeaveBalanceSnapshot, SettlementResult


class SettlementCalculator(ABC):
    """Calculator interface (Strategy Pattern for exit settlements)."""

    @abstractmethod
    def calculate(
        self,
        profile: EmployeeExitProfile,
        exit_date: DateValue,
        leave_balance: Optional[LeaveBalanceSnapshot] = None,
    ) -> SettlementResult:
        raise NotImplementedError
