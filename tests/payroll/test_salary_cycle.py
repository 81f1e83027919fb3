from datetime import date

import pytest

from src.hr_engine.hr_engine.core.exceptions import ValidationError
from src.hr_engine.hr_engine.payroll.salary_cycle import (
    SalaryCycleConfig,
    calculate_mid_cycle_salary,
    calculate_overtime_pay,
    calculate_pro_rata_salary,
    month_bounds,
    working_days_in_cycle,
)


def test_working_days_skip_weekends_and_holidays():
    assert working_days_in_cycle("2024-01-01", "2024-01-31") == 23
    assert working_days_in_cycle("2024-01-01", "2024-01-31", holidays=["2024-01-26"]) == 22
    assert working_days_in_cycle(date(2024, 1, 1), date(2024, 1, 7), weekly_offs=[6]) == 6


def test_pro_rata_salary():
    assert calculate_pro_rata_salary(22000, 11, 22) == 11000.0
    assert calculate_pro_rata_salary(22000, 11, 0) == 0


def test_mid_cycle_exit():
    salary = calculate_mid_cycle_salary(
        23000,
        cycle_start="2024-01-01",
        cycle_end="2024-01-31",
        active_from="2023-06-01",
        active_to="2024-01-12",
    )

    assert salary == 10000.0


def test_mid_cycle_outside_window_is_zero():
    salary = calculate_mid_cycle_salary(
        23000,
        cycle_start="2024-01-01",
        cycle_end="2024-01-31",
        active_from="2024-02-01",
        active_to="2024-02-29",
    )

    assert salary == 0


def test_overtime_pay():
    assert calculate_overtime_pay(19800, 10) == 1500.0
    assert calculate_overtime_pay(19800, -3) == 0


def test_overtime_pay_rejects_invalid_cycle():
    config = SalaryCycleConfig(working_days_per_month=0, working_hours_per_day=30)

    assert len(config.validate()) == 2
    with pytest.raises(ValidationError):
        calculate_overtime_pay(19800, 10, config)


def test_month_bounds():
    assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_bounds(2024, 12) == (date(2024, 12, 1), date(2024, 12, 31))
