from __future__ import annotations

import math
from typing import Optional, Sequence

from ...common.datetime_utils import clock_to_minutes
from ...core.constants import DAILY_OVERTIME_THRESHOLD, DAYS_PER_WEEK, WEEKLY_OVERTIME_THRESHOLD
from ...core.exceptions import ValidationError
from ..model import DayTimes, PayConfig, PaySummary
from .base import OvertimeCalculator


class StandardOvertimeCalculator(OvertimeCalculator):
    """Standard rule: overtime is the larger of the daily and weekly methods.

    Daily method sums each day's hours beyond the daily threshold; weekly method
    takes the week's hours beyond the weekly threshold. The two are never added
    together. Work is done in whole minutes so the comparison is exact.
    """

    def __init__(
        self,
        *,
        daily_threshold_hours: int = DAILY_OVERTIME_THRESHOLD,
        weekly_threshold_hours: int = WEEKLY_OVERTIME_THRESHOLD,
    ):
        self._daily_limit = int(daily_threshold_hours) * 60
        self._weekly_limit = int(weekly_threshold_hours) * 60

    def calculate(self, days: Sequence[DayTimes], config: PayConfig) -> PaySummary:
        if len(days) != DAYS_PER_WEEK:
            raise ValidationError(f"A week needs exactly {DAYS_PER_WEEK} days, got {len(days)}")
        if not (math.isfinite(config.hourly_rate) and math.isfinite(config.overtime_multiplier)):
            raise ValidationError("Pay rates must be finite numbers")
        if config.hourly_rate <= 0:
            raise ValidationError("Hourly rate must be positive")
        if config.overtime_multiplier < 1:
            raise ValidationError("Overtime multiplier must be at least 1")

        day_minutes = [self.worked_minutes(day, day_index=i) for i, day in enumerate(days)]
        total = sum(day_minutes)

        daily_ot = sum(max(0, m - self._daily_limit) for m in day_minutes)
        weekly_ot = max(0, total - self._weekly_limit)
        overtime = max(daily_ot, weekly_ot)
        regular = max(0, total - overtime)

        rate = float(config.hourly_rate)
        regular_hours = regular / 60
        overtime_hours = overtime / 60
        regular_pay = regular_hours * rate
        overtime_pay = overtime_hours * rate * float(config.overtime_multiplier)

        return PaySummary(
            total_hours=total / 60,
            regular_hours=regular_hours,
            overtime_hours=overtime_hours,
            daily_overtime_hours=daily_ot / 60,
            weekly_overtime_hours=weekly_ot / 60,
            regular_pay=regular_pay,
            overtime_pay=overtime_pay,
            gross_pay=regular_pay + overtime_pay,
        )

    def worked_minutes(self, day: DayTimes, *, day_index: int = 0) -> int:
        return _shift_minutes(day.in1, day.out1, day_index) + _shift_minutes(day.in2, day.out2, day_index)


def _shift_minutes(start: Optional[str], end: Optional[str], day_index: int) -> int:
    # Half-filled pair: nothing worked yet.
    if not start or not end:
        return 0
    minutes = clock_to_minutes(end) - clock_to_minutes(start)
    if minutes < 0:
        raise ValidationError(f"Day {day_index + 1}: clock-out {end} is earlier than clock-in {start}")
    return minutes
