from __future__ import annotations

import json
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import AutosaveSlot
from .payloads import AutosavePayload
from .repository import AutosaveRepository


def _optional_float(value) -> Optional[float]:
    return float(value) if value is not None else None


class MySQLAutosaveRepository(AutosaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_owner(self, owner_id: int) -> Optional[AutosaveSlot]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, label, start_date, hourly_rate, overtime_multiplier, times, updated_at
                FROM autosave
                WHERE user_id=%s
                """,
                (int(owner_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return AutosaveSlot(
                user_id=int(r["user_id"]),
                label=r.get("label"),
                start_date=r.get("start_date"),
                hourly_rate=_optional_float(r.get("hourly_rate")),
                overtime_multiplier=_optional_float(r.get("overtime_multiplier")),
                times=json.loads(r.get("times") or "[]"),
                updated_at=r.get("updated_at"),
            )

    def upsert(self, *, owner_id: int, payload: AutosavePayload) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO autosave(user_id, label, start_date, hourly_rate, overtime_multiplier, times, updated_at)
                VALUES(%s,%s,%s,%s,%s,%s,CURRENT_TIMESTAMP)
                ON DUPLICATE KEY UPDATE
                    label=VALUES(label),
                    start_date=VALUES(start_date),
                    hourly_rate=VALUES(hourly_rate),
                    overtime_multiplier=VALUES(overtime_multiplier),
                    times=VALUES(times),
                    updated_at=CURRENT_TIMESTAMP
                """,
                (
                    int(owner_id),
                    payload.label,
                    payload.start_date,
                    payload.hourly_rate,
                    payload.overtime_multiplier,
                    json.dumps(payload.times),
                ),
            )

    def clear(self, owner_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM autosave WHERE user_id=%s", (int(owner_id),))
            return cur.rowcount > 0
