from __future__ import annotations

from typing import Optional, Protocol

from .model import EmployeeExitProfile, LeaveBalanceSnapshot


class EmployeeProfileRepository(Protocol):
    def get_exit_profile(self, employee_id: str) -> Optional[EmployeeExitProfile]:
        raise NotImplementedError


class LeaveLedgerRepository(Protocol):
    def get_balance(self, employee_id: str) -> Optional[LeaveBalanceSnapshot]:
        raise NotImplementedError
