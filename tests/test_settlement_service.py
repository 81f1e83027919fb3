from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from src.hr_engine.hr_engine.core.exceptions import NotFoundError
from src.hr_engine.hr_engine.payroll.model import EmployeeExitProfile, LeaveBalanceSnapshot
from src.hr_engine.hr_engine.payroll.service import SettlementService

import pytest


@dataclass
class InMemoryProfiles:
    profiles: dict[str, EmployeeExitProfile]

    def get_exit_profile(self, employee_id: str) -> Optional[EmployeeExitProfile]:
        return self.profiles.get(employee_id)


@dataclass
class InMemoryLeaveLedger:
    balances: dict[str, LeaveBalanceSnapshot]

    def get_balance(self, employee_id: str) -> Optional[LeaveBalanceSnapshot]:
        return self.balances.get(employee_id)


PROFILES = InMemoryProfiles(
    {
        "E1": EmployeeExitProfile(annual_ctc=360_000, date_of_joining="2021-07-01", employee_id="E1", name="A"),
        "E2": EmployeeExitProfile(annual_ctc=480_000, date_of_joining="not a date", employee_id="E2", name="B"),
        "E3": EmployeeExitProfile(
            annual_ctc=360_000, date_of_joining="2015-01-01", annual_bonus=None, employee_id="E3", name="C"
        ),
    }
)
LEDGER = InMemoryLeaveLedger({"E1": LeaveBalanceSnapshot(paid_leave_available=3)})


def test_settle_uses_profile_and_leave_ledger():
    svc = SettlementService(PROFILES, LEDGER)

    report = svc.settle("E1", "2024-06-30")

    # monthly 30000: full June salary plus 3 days at 1000/day
    assert report.breakdown.pro_rata_salary == 30000.0
    assert report.breakdown.leave_encashment == 3000.0
    assert report.summary.net_settlement == 33000.0
    assert report.employee_name == "A"
    assert report.warnings == ("no resignation date; full notice period assumed served",)


def test_settle_unknown_employee():
    svc = SettlementService(PROFILES)

    with pytest.raises(NotFoundError):
        svc.settle("nobody", "2024-06-30")


def test_settle_many_collects_failures_without_stopping(caplog):
    svc = SettlementService(PROFILES, LEDGER)

    with caplog.at_level("ERROR"):
        batch = svc.settle_many([("E2", "30/06/2024"), ("nobody", "2024-06-30"), ("E1", "2024-06-30")])

    assert [r.employee_id for r in batch.reports] == ["E1"]
    assert set(batch.failures) == {"E2", "nobody"}
    assert "Settlement for E2 failed" in caplog.text


def test_settle_many_keeps_degraded_records_in_the_batch():
    svc = SettlementService(PROFILES, LEDGER)

    batch = svc.settle_many([("E3", "2024-06-30"), ("E2", "2024-06-30"), ("E1", "2024-06-30")])

    assert [r.employee_id for r in batch.reports] == ["E3", "E2", "E1"]
    assert batch.failures == {}
    no_bonus, bad_joining, _ = batch.reports
    assert no_bonus.breakdown.pro_rated_bonus == 0
    assert "missing or invalid annual bonus None replaced with 0" in no_bonus.warnings
    assert bad_joining.breakdown.gratuity == 0
    assert bad_joining.tenure == "0 years"
    assert any("date of joining" in w for w in bad_joining.warnings)
