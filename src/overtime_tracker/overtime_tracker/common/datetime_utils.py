from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Optional

from ..core.exceptions import ValidationError

_CLOCK_RE = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def optional_iso_date(value: Any, field_name: str) -> Optional[date]:
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date")
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date")


def normalize_clock(value: Any, field_name: str) -> Optional[str]:
    """Validate a time-of-day value and return it as zero-padded "HH:MM".

    Empty strings and None both mean "not set".
    """
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a HH:MM time")
    m = _CLOCK_RE.match(value.strip())
    if not m:
        raise ValidationError(f"{field_name} must be a HH:MM time")
    return f"{int(m.group(1)):02d}:{m.group(2)}"


def clock_to_minutes(value: str) -> int:
    """Minutes since midnight for an "HH:MM" string."""
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.strftime("%Y-%m-%d %H:%M:%S")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
