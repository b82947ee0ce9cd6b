from __future__ import annotations

from datetime import date

import pytest

from overtime_tracker.payroll.model import PayConfig
from overtime_tracker.payroll.service import PayrollService
from overtime_tracker.weeks.model import TimeEntry, Week


def test_summarize_week_uses_week_rate_and_entry_order():
    # Entries deliberately out of order.
    entries = (
        TimeEntry(day_index=3, in1="08:00", out1="18:00"),
        TimeEntry(day_index=0, in1="08:00", out1="12:00"),
    ) + tuple(TimeEntry(day_index=i) for i in (1, 2, 4, 5, 6))
    wk = Week(
        week_id=1,
        user_id=1,
        label="W1",
        start_date=date(2026, 1, 5),
        hourly_rate=20.0,
        overtime_multiplier=2.0,
        entries=entries,
    )

    s = PayrollService().summarize_week(wk)

    assert s.total_hours == 14
    assert s.overtime_hours == 1
    assert s.gross_pay == pytest.approx(13 * 20.0 + 1 * 20.0 * 2.0)


def test_summarize_entries():
    entries = [TimeEntry(day_index=i, in1="09:00", out1="17:00") for i in range(7)]

    s = PayrollService().summarize(entries, PayConfig())

    assert s.total_hours == 56
    assert s.overtime_hours == 16
