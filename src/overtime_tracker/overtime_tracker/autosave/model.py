from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import format_timestamp


@dataclass(frozen=True)
class AutosaveSlot:
    """A user's single in-progress timesheet draft."""

    user_id: int
    label: Optional[str]
    start_date: Optional[str]
    hourly_rate: Optional[float]
    overtime_multiplier: Optional[float]
    times: list = field(default_factory=list)
    updated_at: Optional[datetime] = None

    def to_json(self) -> dict:
        return {
            "weekLabel": self.label,
            "startDate": self.start_date,
            "hourlyRate": self.hourly_rate,
            "overtimeMultiplier": self.overtime_multiplier,
            "times": self.times,
            "updatedAt": format_timestamp(self.updated_at),
        }
