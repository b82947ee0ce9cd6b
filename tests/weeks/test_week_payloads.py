from __future__ import annotations

from datetime import date

import pytest

from overtime_tracker.core.exceptions import ValidationError
from overtime_tracker.weeks.payloads import CalculationPayload, WeekPayload


def body(times, **data):
    d = {"startDate": "2026-01-05", "hourlyRate": 45, "overtimeMultiplier": 1.5, "times": times}
    d.update(data)
    return {"label": "Week 1", "data": d}


def test_parses_valid_week(times_factory):
    p = WeekPayload.from_json(body(times_factory(("8:00", "17:00"), ("08:00", "12:00", "13:00", "18:00"))))

    assert p.label == "Week 1"
    assert p.start_date == date(2026, 1, 5)
    assert p.config.hourly_rate == 45.0
    assert [e.day_index for e in p.entries] == list(range(7))
    assert p.entries[0].in1 == "08:00"
    assert p.entries[1].out2 == "18:00"
    assert p.entries[2].in1 is None


def test_day_index_comes_from_position(times_factory):
    times = times_factory()
    for t in times:
        t["day_index"] = 6

    p = WeekPayload.from_json(body(times))

    assert [e.day_index for e in p.entries] == list(range(7))


def test_empty_strings_mean_not_set():
    times = [{"in1": "", "out1": "", "in2": "", "out2": ""}] * 7

    p = WeekPayload.from_json(body(times))

    assert all(e.in1 is None and e.out2 is None for e in p.entries)


def test_defaults_for_missing_rate_and_multiplier(times_factory):
    raw = body(times_factory())
    del raw["data"]["hourlyRate"]
    del raw["data"]["overtimeMultiplier"]

    p = WeekPayload.from_json(raw)

    assert p.config.hourly_rate == 45.0
    assert p.config.overtime_multiplier == 1.5


@pytest.mark.parametrize(
    "mutate",
    [
        lambda b: b.pop("label"),
        lambda b: b.update(label="   "),
        lambda b: b.pop("data"),
        lambda b: b["data"].update(times=[]),
        lambda b: b["data"].update(startDate="05/01/2026"),
        lambda b: b["data"].update(hourlyRate="abc"),
        lambda b: b["data"].update(hourlyRate=-1),
        lambda b: b["data"].update(overtimeMultiplier=0.9),
        lambda b: b["data"].update(hourlyRate="nan"),
        lambda b: b["data"].update(hourlyRate="inf"),
        lambda b: b["data"].update(hourlyRate=float("nan")),
        lambda b: b["data"].update(overtimeMultiplier=float("inf")),
        lambda b: b["data"].update(hourlyRate="1e400"),
        lambda b: b["data"]["times"].__setitem__(0, {"in1": "25:00", "out1": "26:00"}),
        lambda b: b["data"]["times"].__setitem__(0, {"in1": 8, "out1": 17}),
    ],
)
def test_rejects_bad_input(times_factory, mutate):
    raw = body(times_factory())
    mutate(raw)

    with pytest.raises(ValidationError):
        WeekPayload.from_json(raw)


def test_rejects_shift_ending_before_it_starts(times_factory):
    with pytest.raises(ValidationError, match="earlier than clock-in"):
        WeekPayload.from_json(body(times_factory(None, ("18:00", "09:00"))))


def test_rejects_non_object_body():
    with pytest.raises(ValidationError):
        WeekPayload.from_json(None)


def test_calculation_payload(times_factory):
    p = CalculationPayload.from_json({"hourlyRate": "30", "times": times_factory(("09:00", "17:00"))})

    assert p.config.hourly_rate == 30.0
    assert p.entries[0].out1 == "17:00"
