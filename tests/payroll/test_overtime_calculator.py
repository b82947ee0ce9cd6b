from __future__ import annotations

import pytest

from overtime_tracker.core.exceptions import ValidationError
from overtime_tracker.payroll.calculator.standard_calculator import StandardOvertimeCalculator
from overtime_tracker.payroll.model import DayTimes, PayConfig

EMPTY = DayTimes()
CONFIG = PayConfig(hourly_rate=45.0, overtime_multiplier=1.5)


def week(*days: DayTimes) -> list[DayTimes]:
    return list(days) + [EMPTY] * (7 - len(days))


def test_no_overtime_when_days_and_week_under_limits():
    days = week(*[DayTimes(in1="08:00", out1="16:00")] * 5)  # 5 x 8h = 40h

    s = StandardOvertimeCalculator().calculate(days, CONFIG)

    assert s.total_hours == 40
    assert s.overtime_hours == 0
    assert s.regular_hours == 40
    assert s.gross_pay == pytest.approx(40 * 45.0)


def test_single_ten_hour_day_gives_one_hour_daily_overtime():
    days = week(DayTimes(in1="07:00", out1="17:00"))

    s = StandardOvertimeCalculator().calculate(days, CONFIG)

    assert s.daily_overtime_hours == 1
    assert s.weekly_overtime_hours == 0
    assert s.overtime_hours == 1
    assert s.regular_hours == 9


def test_five_nine_hour_days_weekly_rule_wins():
    days = week(*[DayTimes(in1="08:00", out1="17:00")] * 5)

    s = StandardOvertimeCalculator().calculate(days, CONFIG)

    assert s.daily_overtime_hours == 0
    assert s.weekly_overtime_hours == 5
    assert s.overtime_hours == 5
    assert s.regular_hours == 40


def test_takes_larger_method_not_the_sum():
    # Two 12h days (daily 6h) + three 8h days: total 48h, weekly 8h.
    long_day = DayTimes(in1="06:00", out1="18:00")
    normal = DayTimes(in1="09:00", out1="17:00")
    days = week(long_day, long_day, normal, normal, normal)

    s = StandardOvertimeCalculator().calculate(days, CONFIG)

    assert s.daily_overtime_hours == 6
    assert s.weekly_overtime_hours == 8
    assert s.overtime_hours == 8
    assert s.regular_hours == 40


def test_gross_pay_formula():
    days = week(DayTimes(in1="07:00", out1="12:00", in2="13:00", out2="18:30"))  # 10.5h

    s = StandardOvertimeCalculator().calculate(days, CONFIG)

    assert s.overtime_hours == pytest.approx(1.5)
    assert s.regular_hours == pytest.approx(9)
    assert s.gross_pay == pytest.approx(9 * 45.0 + 1.5 * 45.0 * 1.5)
    assert s.gross_pay == pytest.approx(s.regular_pay + s.overtime_pay)


def test_half_filled_pair_counts_as_zero():
    days = week(DayTimes(in1="08:00", out1=None), DayTimes(in1="08:00", out1="12:00", in2="13:00"))

    s = StandardOvertimeCalculator().calculate(days, CONFIG)

    assert s.total_hours == 4


def test_out_before_in_is_rejected():
    days = week(EMPTY, DayTimes(in1="17:00", out1="08:00"))

    with pytest.raises(ValidationError, match="Day 2"):
        StandardOvertimeCalculator().calculate(days, CONFIG)


def test_requires_seven_days():
    with pytest.raises(ValidationError):
        StandardOvertimeCalculator().calculate([EMPTY] * 6, CONFIG)


@pytest.mark.parametrize(
    "config",
    [
        PayConfig(hourly_rate=0),
        PayConfig(overtime_multiplier=0.5),
        PayConfig(hourly_rate=float("nan")),
        PayConfig(overtime_multiplier=float("inf")),
    ],
)
def test_rejects_bad_pay_config(config):
    with pytest.raises(ValidationError):
        StandardOvertimeCalculator().calculate([EMPTY] * 7, config)


def test_custom_thresholds():
    calc = StandardOvertimeCalculator(daily_threshold_hours=8, weekly_threshold_hours=38)
    days = week(DayTimes(in1="08:00", out1="17:00"))

    assert calc.calculate(days, CONFIG).overtime_hours == 1
