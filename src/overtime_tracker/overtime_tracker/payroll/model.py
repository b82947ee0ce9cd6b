from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_HOURLY_RATE, DEFAULT_OVERTIME_MULTIPLIER


@dataclass(frozen=True)
class DayTimes:
    """One day's clock-in/clock-out pairs as "HH:MM" strings (None = not set)."""

    in1: Optional[str] = None
    out1: Optional[str] = None
    in2: Optional[str] = None
    out2: Optional[str] = None


@dataclass(frozen=True)
class PayConfig:
    hourly_rate: float = DEFAULT_HOURLY_RATE
    overtime_multiplier: float = DEFAULT_OVERTIME_MULTIPLIER


@dataclass(frozen=True)
class PaySummary:
    total_hours: float
    regular_hours: float
    overtime_hours: float
    daily_overtime_hours: float
    weekly_overtime_hours: float
    regular_pay: float
    overtime_pay: float
    gross_pay: float

    def to_json(self) -> dict:
        return {
            "totalHours": self.total_hours,
            "regularHours": self.regular_hours,
            "overtimeHours": self.overtime_hours,
            "dailyOvertimeHours": self.daily_overtime_hours,
            "weeklyOvertimeHours": self.weekly_overtime_hours,
            "regularPay": self.regular_pay,
            "overtimePay": self.overtime_pay,
            "grossPay": self.gross_pay,
        }
