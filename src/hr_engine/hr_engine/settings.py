from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from datetime import timedelta
from types import ModuleType
from typing import Optional

from dotenv import load_dotenv

from config import get_settings_module

from .core.constants import DEFAULT_UTC_OFFSET_MINUTES
from .payroll.model import DEFAULT_POLICY, SettlementPolicy
from .payroll.salary_cycle import DEFAULT_CYCLE_CONFIG, SalaryCycleConfig
from .shifts.model import DEFAULT_ROSTER, ShiftRoster


@dataclass(frozen=True)
class EngineSettings:
    default_roster: ShiftRoster = DEFAULT_ROSTER
    settlement_policy: SettlementPolicy = DEFAULT_POLICY
    salary_cycle: SalaryCycleConfig = DEFAULT_CYCLE_CONFIG
    log_level: str = "INFO"
    settings_module: Optional[str] = field(default=None, compare=False)


def settings_from_module(settings: ModuleType) -> EngineSettings:
    offset = int(getattr(settings, "UTC_OFFSET_MINUTES", DEFAULT_UTC_OFFSET_MINUTES))
    base = DEFAULT_ROSTER.with_overrides(utc_offset=timedelta(minutes=offset))
    roster = ShiftRoster.from_mapping(getattr(settings, "SHIFT", {}) or {}, base=base)

    policy = SettlementPolicy(
        notice_period_days=int(getattr(settings, "NOTICE_PERIOD_DAYS", DEFAULT_POLICY.notice_period_days)),
        gratuity_min_years=float(getattr(settings, "GRATUITY_MIN_YEARS", DEFAULT_POLICY.gratuity_min_years)),
    )
    cycle = SalaryCycleConfig(**(getattr(settings, "SALARY_CYCLE", {}) or {})).ensure_valid()

    return EngineSettings(
        default_roster=roster,
        settlement_policy=policy,
        salary_cycle=cycle,
        log_level=str(getattr(settings, "LOG_LEVEL", "INFO")),
        settings_module=settings.__name__,
    )


def load_settings(settings_module: Optional[str] = None) -> EngineSettings:
    load_dotenv(override=False)
    module = importlib.import_module(settings_module or get_settings_module())
    return settings_from_module(module)
