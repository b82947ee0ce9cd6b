from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..payroll.model import PayConfig
from .model import TimeEntry, Week
from .repository import WeekRepository


def _row_to_entry(r: dict) -> TimeEntry:
    return TimeEntry(
        day_index=int(r["day_index"]),
        in1=r.get("in1"),
        out1=r.get("out1"),
        in2=r.get("in2"),
        out2=r.get("out2"),
    )


def _row_to_week(r: dict, entries: Sequence[TimeEntry]) -> Week:
    return Week(
        week_id=int(r["id"]),
        user_id=int(r["user_id"]),
        label=r["label"],
        start_date=r.get("start_date"),
        hourly_rate=float(r["hourly_rate"]),
        overtime_multiplier=float(r["overtime_multiplier"]),
        created_at=r.get("created_at"),
        entries=tuple(sorted(entries, key=lambda e: e.day_index)),
    )


class MySQLWeekRepository(WeekRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_week(
        self,
        *,
        owner_id: int,
        label: str,
        start_date: Optional[date],
        config: PayConfig,
        entries: Sequence[TimeEntry],
    ) -> int:
        # Same cursor/transaction: a failing entry insert rolls back the week row too.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO weeks(user_id, label, start_date, hourly_rate, overtime_multiplier)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (int(owner_id), label, start_date, config.hourly_rate, config.overtime_multiplier),
            )
            week_id = int(cur.lastrowid)
            cur.executemany(
                """
                INSERT INTO time_entries(week_id, day_index, in1, out1, in2, out2)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                [(week_id, e.day_index, e.in1, e.out1, e.in2, e.out2) for e in entries],
            )
            return week_id

    def list_for_owner(self, owner_id: int) -> Sequence[Week]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, user_id, label, start_date, hourly_rate, overtime_multiplier, created_at
                FROM weeks
                WHERE user_id=%s
                ORDER BY created_at DESC, id DESC
                """,
                (int(owner_id),),
            )
            week_rows = fetchall(cur)
            if not week_rows:
                return []

            cur.execute(
                """
                SELECT t.week_id, t.day_index, t.in1, t.out1, t.in2, t.out2
                FROM time_entries t
                JOIN weeks w ON w.id = t.week_id
                WHERE w.user_id=%s
                ORDER BY t.week_id, t.day_index
                """,
                (int(owner_id),),
            )
            by_week: dict[int, list[TimeEntry]] = {}
            for r in fetchall(cur):
                by_week.setdefault(int(r["week_id"]), []).append(_row_to_entry(r))

            return [_row_to_week(r, by_week.get(int(r["id"]), [])) for r in week_rows]

    def get_by_id(self, week_id: int) -> Optional[Week]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, user_id, label, start_date, hourly_rate, overtime_multiplier, created_at
                FROM weeks
                WHERE id=%s
                """,
                (int(week_id),),
            )
            row = fetchone(cur)
            if not row:
                return None

            cur.execute(
                """
                SELECT day_index, in1, out1, in2, out2
                FROM time_entries
                WHERE week_id=%s
                ORDER BY day_index
                """,
                (int(week_id),),
            )
            return _row_to_week(row, [_row_to_entry(r) for r in fetchall(cur)])

    def delete(self, week_id: int) -> bool:
        # time_entries go with it (ON DELETE CASCADE).
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM weeks WHERE id=%s", (int(week_id),))
            return cur.rowcount > 0
