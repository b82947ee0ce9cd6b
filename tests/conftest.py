from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta
from typing import Optional

import pytest

from overtime_tracker.autosave.model import AutosaveSlot
from overtime_tracker.container import wire
from overtime_tracker.main import create_app
from overtime_tracker.users.model import User
from overtime_tracker.weeks.model import Week


class InMemoryUsers:
    def __init__(self):
        self._by_id: dict[int, User] = {}
        self._next_id = 1

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._by_id.get(int(user_id))

    def get_by_username(self, username: str) -> Optional[User]:
        for u in self._by_id.values():
            if u.username == username:
                return u
        return None

    def create_user(self, *, username: str, password_hash: str) -> int:
        uid = self._next_id
        self._next_id += 1
        self._by_id[uid] = User(user_id=uid, username=username, password_hash=password_hash)
        return uid


class InMemoryWeeks:
    """Weeks and entries kept apart, like the two tables."""

    def __init__(self):
        self._weeks: dict[int, Week] = {}
        self.entries: dict[int, tuple] = {}
        self._next_id = 1
        self._clock = datetime(2026, 1, 5, 9, 0, 0)

    def create_week(self, *, owner_id, label, start_date, config, entries) -> int:
        wid = self._next_id
        self._next_id += 1
        self._clock += timedelta(minutes=1)
        self._weeks[wid] = Week(
            week_id=wid,
            user_id=int(owner_id),
            label=label,
            start_date=start_date,
            hourly_rate=config.hourly_rate,
            overtime_multiplier=config.overtime_multiplier,
            created_at=self._clock,
        )
        self.entries[wid] = tuple(entries)
        return wid

    def _with_entries(self, week: Week) -> Week:
        return replace(week, entries=tuple(sorted(self.entries.get(week.week_id, ()), key=lambda e: e.day_index)))

    def list_for_owner(self, owner_id: int):
        items = [self._with_entries(w) for w in self._weeks.values() if w.user_id == int(owner_id)]
        items.sort(key=lambda w: (w.created_at, w.week_id), reverse=True)
        return items

    def get_by_id(self, week_id: int) -> Optional[Week]:
        w = self._weeks.get(int(week_id))
        return self._with_entries(w) if w else None

    def delete(self, week_id: int) -> bool:
        if int(week_id) not in self._weeks:
            return False
        del self._weeks[int(week_id)]
        self.entries.pop(int(week_id), None)
        return True


class InMemoryAutosave:
    def __init__(self):
        self.slots: dict[int, AutosaveSlot] = {}

    def get_for_owner(self, owner_id: int) -> Optional[AutosaveSlot]:
        return self.slots.get(int(owner_id))

    def upsert(self, *, owner_id: int, payload) -> None:
        self.slots[int(owner_id)] = AutosaveSlot(
            user_id=int(owner_id),
            label=payload.label,
            start_date=payload.start_date,
            hourly_rate=payload.hourly_rate,
            overtime_multiplier=payload.overtime_multiplier,
            times=list(payload.times),
            updated_at=datetime(2026, 1, 5, 12, 0, 0),
        )

    def clear(self, owner_id: int) -> bool:
        return self.slots.pop(int(owner_id), None) is not None


@pytest.fixture
def users_repo():
    return InMemoryUsers()


@pytest.fixture
def weeks_repo():
    return InMemoryWeeks()


@pytest.fixture
def autosave_repo():
    return InMemoryAutosave()


@pytest.fixture
def container(users_repo, weeks_repo, autosave_repo):
    return wire(users_repo=users_repo, weeks_repo=weeks_repo, autosave_repo=autosave_repo)


@pytest.fixture
def app(container):
    return create_app(settings_module="config.testing", container=container)


@pytest.fixture
def client(app):
    return app.test_client()


def make_times(*days):
    """Build a 7-day `times` array; each given day is (in1, out1) or (in1, out1, in2, out2)."""
    out = []
    for i in range(7):
        clocks = days[i] if i < len(days) and days[i] else ()
        names = ("in1", "out1", "in2", "out2")
        entry = {"day_index": i, "in1": None, "out1": None, "in2": None, "out2": None}
        entry.update(dict(zip(names, clocks)))
        out.append(entry)
    return out


@pytest.fixture
def times_factory():
    return make_times


@pytest.fixture
def login(client):
    def _login(username="alice", password="secret1"):
        resp = client.post("/api/register", json={"username": username, "password": password})
        if resp.status_code != 200:
            resp = client.post("/api/login", json={"username": username, "password": password})
        assert resp.status_code == 200
        return resp

    return _login
