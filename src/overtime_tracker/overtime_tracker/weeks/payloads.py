"""Typed request bodies for the week endpoints.

Each payload validates its JSON at the API boundary and raises ValidationError,
so services and repositories only ever see clean values.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from ..common.datetime_utils import normalize_clock, optional_iso_date
from ..common.validators import optional_number, require_max_length, require_non_empty, require_object
from ..core.constants import DAYS_PER_WEEK, DEFAULT_HOURLY_RATE, DEFAULT_OVERTIME_MULTIPLIER, MAX_LABEL_LENGTH
from ..core.exceptions import ValidationError
from ..payroll.calculator.standard_calculator import StandardOvertimeCalculator
from ..payroll.model import PayConfig
from .model import TimeEntry

CLOCK_FIELDS = ("in1", "out1", "in2", "out2")


def parse_times(value: Any) -> tuple[TimeEntry, ...]:
    """Parse the 7-item `times` array; day_index comes from the position."""
    if not isinstance(value, list) or len(value) != DAYS_PER_WEEK:
        raise ValidationError(f"times must be a list of {DAYS_PER_WEEK} days")

    entries: list[TimeEntry] = []
    for i, raw in enumerate(value):
        if raw is None:
            raw = {}
        raw = require_object(raw, f"times[{i}]")
        clocks = {name: normalize_clock(raw.get(name), f"times[{i}].{name}") for name in CLOCK_FIELDS}
        entries.append(TimeEntry(day_index=i, **clocks))
    return tuple(entries)


def parse_pay_config(data: dict) -> PayConfig:
    config = PayConfig(
        hourly_rate=optional_number(data.get("hourlyRate"), "hourlyRate", DEFAULT_HOURLY_RATE),
        overtime_multiplier=optional_number(
            data.get("overtimeMultiplier"), "overtimeMultiplier", DEFAULT_OVERTIME_MULTIPLIER
        ),
    )
    if config.hourly_rate <= 0:
        raise ValidationError("hourlyRate must be positive")
    if config.overtime_multiplier < 1:
        raise ValidationError("overtimeMultiplier must be at least 1")
    return config


@dataclass(frozen=True)
class WeekPayload:
    label: str
    start_date: Optional[date]
    config: PayConfig
    entries: tuple[TimeEntry, ...]

    @classmethod
    def from_json(cls, body: Any) -> "WeekPayload":
        body = require_object(body, "Request body")
        label = require_non_empty(body.get("label"), "label")
        require_max_length(label, "label", MAX_LABEL_LENGTH)
        data = require_object(body.get("data"), "data")

        payload = cls(
            label=label,
            start_date=optional_iso_date(data.get("startDate"), "startDate"),
            config=parse_pay_config(data),
            entries=parse_times(data.get("times")),
        )
        # Rejects shifts that end before they start.
        StandardOvertimeCalculator().calculate([e.to_day_times() for e in payload.entries], payload.config)
        return payload


@dataclass(frozen=True)
class CalculationPayload:
    config: PayConfig
    entries: tuple[TimeEntry, ...]

    @classmethod
    def from_json(cls, body: Any) -> "CalculationPayload":
        body = require_object(body, "Request body")
        return cls(config=parse_pay_config(body), entries=parse_times(body.get("times")))
