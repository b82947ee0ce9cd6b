from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import format_timestamp
from ..payroll.model import DayTimes, PayConfig


@dataclass(frozen=True)
class TimeEntry:
    """One day of a saved week: up to two clock-in/clock-out pairs."""

    day_index: int
    in1: Optional[str] = None
    out1: Optional[str] = None
    in2: Optional[str] = None
    out2: Optional[str] = None

    def to_day_times(self) -> DayTimes:
        return DayTimes(in1=self.in1, out1=self.out1, in2=self.in2, out2=self.out2)

    def to_json(self) -> dict:
        return {
            "day_index": self.day_index,
            "in1": self.in1,
            "out1": self.out1,
            "in2": self.in2,
            "out2": self.out2,
        }


@dataclass(frozen=True)
class Week:
    week_id: int
    user_id: int
    label: str
    start_date: Optional[date]
    hourly_rate: float
    overtime_multiplier: float
    created_at: Optional[datetime] = None
    entries: tuple[TimeEntry, ...] = field(default_factory=tuple)

    @property
    def pay_config(self) -> PayConfig:
        return PayConfig(hourly_rate=self.hourly_rate, overtime_multiplier=self.overtime_multiplier)

    def day_times(self) -> list[DayTimes]:
        return [e.to_day_times() for e in sorted(self.entries, key=lambda e: e.day_index)]

    def to_json(self) -> dict:
        return {
            "id": self.week_id,
            "label": self.label,
            "savedAt": format_timestamp(self.created_at),
            "data": {
                "startDate": self.start_date.strftime("%Y-%m-%d") if self.start_date else None,
                "hourlyRate": self.hourly_rate,
                "overtimeMultiplier": self.overtime_multiplier,
                "times": [e.to_json() for e in sorted(self.entries, key=lambda e: e.day_index)],
            },
        }
