from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .autosave.mysql_autosave_repository import MySQLAutosaveRepository
from .autosave.repository import AutosaveRepository
from .autosave.service import AutosaveService
from .database.connection import DBConfig, DatabaseConnection
from .payroll.service import PayrollService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService
from .weeks.mysql_week_repository import MySQLWeekRepository
from .weeks.repository import WeekRepository
from .weeks.service import WeekService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    weeks_repo: WeekRepository
    autosave_repo: AutosaveRepository

    auth_service: AuthService
    week_service: WeekService
    payroll_service: PayrollService
    autosave_service: AutosaveService


def wire(
    *,
    users_repo: UserRepository,
    weeks_repo: WeekRepository,
    autosave_repo: AutosaveRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    return Container(
        conn=conn,
        users_repo=users_repo,
        weeks_repo=weeks_repo,
        autosave_repo=autosave_repo,
        auth_service=AuthService(users_repo),
        week_service=WeekService(weeks_repo),
        payroll_service=PayrollService(),
        autosave_service=AutosaveService(autosave_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))
    return wire(
        users_repo=MySQLUserRepository(conn),
        weeks_repo=MySQLWeekRepository(conn),
        autosave_repo=MySQLAutosaveRepository(conn),
        conn=conn,
    )
