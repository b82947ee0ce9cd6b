from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ..model import DayTimes, PayConfig, PaySummary


class OvertimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(self, days: Sequence[DayTimes], config: PayConfig) -> PaySummary:
        raise NotImplementedError
