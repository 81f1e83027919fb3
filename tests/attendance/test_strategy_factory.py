from datetime import time

from src.hr_engine.hr_engine.attendance.factory import AttendanceStrategyFactory
from src.hr_engine.hr_engine.attendance.strategies.half_day_strategy import HalfDayStrategy
from src.hr_engine.hr_engine.attendance.strategies.late_strategy import LateStrategy
from src.hr_engine.hr_engine.attendance.strategies.lwp_strategy import LeaveWithoutPayStrategy
from src.hr_engine.hr_engine.attendance.strategies.normal_strategy import NormalStrategy
from src.hr_engine.hr_engine.core.enums import AttendanceStatus
from src.hr_engine.hr_engine.shifts.model import ShiftRoster


def test_factory_checkin_on_time_within_grace():
    roster = ShiftRoster(start_time=time(8, 0), grace_period_minutes=5)

    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(clock_in=time(8, 5), roster=roster)

    assert isinstance(strategy, NormalStrategy)


def test_factory_checkin_late_after_grace():
    roster = ShiftRoster(start_time=time(8, 0), grace_period_minutes=5)

    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(clock_in=time(8, 6), roster=roster)

    assert isinstance(strategy, LateStrategy)
    decision = strategy.decide_checkin(clock_in=time(8, 6), roster=roster)
    assert decision.status == AttendanceStatus.LATE
    assert decision.note == "late by 6 min"


def test_factory_checkout_tiers():
    roster = ShiftRoster()
    factory = AttendanceStrategyFactory()

    assert isinstance(factory.for_checkout(work_hours=3.99, roster=roster), LeaveWithoutPayStrategy)
    assert isinstance(factory.for_checkout(work_hours=4.0, roster=roster), HalfDayStrategy)
    assert isinstance(factory.for_checkout(work_hours=7.99, roster=roster), HalfDayStrategy)
    assert isinstance(factory.for_checkout(work_hours=8.0, roster=roster), NormalStrategy)


def test_full_day_checkout_keeps_late_status():
    decision = NormalStrategy().decide_checkout(work_hours=9.0, roster=ShiftRoster(), current=AttendanceStatus.LATE)

    assert decision.status == AttendanceStatus.LATE
    assert decision.working_days == 1.0


def test_half_day_checkout_overrides_late_status():
    decision = HalfDayStrategy().decide_checkout(work_hours=5.0, roster=ShiftRoster(), current=AttendanceStatus.LATE)

    assert decision.status == AttendanceStatus.HALF_DAY
    assert decision.working_days == 0.5
