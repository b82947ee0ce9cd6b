from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Plain data object, no DB access.
    """

    user_id: int
    username: str
    password_hash: str
    created_at: Optional[datetime] = None
