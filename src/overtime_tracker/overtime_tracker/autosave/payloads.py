from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..common.validators import optional_number, require_max_length, require_object
from ..core.constants import DAYS_PER_WEEK, MAX_LABEL_LENGTH
from ..core.exceptions import ValidationError

DRAFT_FIELDS = ("in1", "out1", "in2", "out2")


def _optional_text(value: Any, field_name: str, max_len: int) -> Optional[str]:
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return require_max_length(value, field_name, max_len)


def _draft_times(value: Any) -> list:
    # Drafts are saved while the user types, so clock values are kept verbatim.
    if value is None:
        return []
    if not isinstance(value, list) or len(value) > DAYS_PER_WEEK:
        raise ValidationError(f"times must be a list of at most {DAYS_PER_WEEK} days")

    out: list[dict] = []
    for i, raw in enumerate(value):
        raw = require_object(raw if raw is not None else {}, f"times[{i}]")
        day = {"day_index": i}
        for name in DRAFT_FIELDS:
            v = raw.get(name)
            if v is not None and not isinstance(v, str):
                raise ValidationError(f"times[{i}].{name} must be a string")
            day[name] = v or None
        out.append(day)
    return out


@dataclass(frozen=True)
class AutosavePayload:
    label: Optional[str]
    start_date: Optional[str]
    hourly_rate: Optional[float]
    overtime_multiplier: Optional[float]
    times: list = field(default_factory=list)

    @classmethod
    def from_json(cls, body: Any) -> "AutosavePayload":
        body = require_object(body, "Request body")
        return cls(
            label=_optional_text(body.get("weekLabel"), "weekLabel", MAX_LABEL_LENGTH),
            start_date=_optional_text(body.get("startDate"), "startDate", 32),
            hourly_rate=optional_number(body.get("hourlyRate"), "hourlyRate", None),
            overtime_multiplier=optional_number(body.get("overtimeMultiplier"), "overtimeMultiplier", None),
            times=_draft_times(body.get("times")),
        )
