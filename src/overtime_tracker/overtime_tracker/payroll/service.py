from __future__ import annotations

from typing import Optional, Sequence

from ..weeks.model import TimeEntry, Week
from .calculator.base import OvertimeCalculator
from .calculator.standard_calculator import StandardOvertimeCalculator
from .model import PayConfig, PaySummary


class PayrollService:
    def __init__(self, *, calculator: Optional[OvertimeCalculator] = None):
        self._calculator = calculator or StandardOvertimeCalculator()

    def summarize(self, entries: Sequence[TimeEntry], config: PayConfig) -> PaySummary:
        days = [e.to_day_times() for e in sorted(entries, key=lambda e: e.day_index)]
        return self._calculator.calculate(days, config)

    def summarize_week(self, week: Week) -> PaySummary:
        return self._calculator.calculate(week.day_times(), week.pay_config)
