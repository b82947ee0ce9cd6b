from __future__ import annotations

from typing import Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import User
from .repository import UserRepository


def _row_to_user(row: dict) -> User:
    return User(
        user_id=int(row["id"]),
        username=row["username"],
        password_hash=row["password_hash"],
        created_at=row.get("created_at"),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, username, password_hash, created_at FROM users WHERE id=%s",
                (int(user_id),),
            )
            row = fetchone(cur)
            return _row_to_user(row) if row else None

    def get_by_username(self, username: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, username, password_hash, created_at FROM users WHERE username=%s",
                (username,),
            )
            row = fetchone(cur)
            return _row_to_user(row) if row else None

    def create_user(self, *, username: str, password_hash: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    "INSERT INTO users(username, password_hash) VALUES(%s,%s)",
                    (username, password_hash),
                )
            except mysql.connector.IntegrityError as e:
                # A concurrent registration won the unique key.
                if e.errno == errorcode.ER_DUP_ENTRY:
                    raise ValidationError("Username already taken") from e
                raise
            return int(cur.lastrowid)
