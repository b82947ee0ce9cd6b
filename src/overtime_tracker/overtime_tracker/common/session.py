"""Session gate for the JSON API.

The Flask session only carries identity; each protected request rebuilds an
explicit RequestContext from it and hands that to the view.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import wraps
from typing import Optional

from flask import current_app, session

from ..core.exceptions import AuthenticationError
from ..users.service import SessionUser
from .datetime_utils import now_local


@dataclass(frozen=True)
class RequestContext:
    user_id: int
    username: str


def start_session(user: SessionUser) -> None:
    session.clear()
    session.permanent = True
    session["user_id"] = user.user_id
    session["username"] = user.username
    session["issued_at"] = now_local().timestamp()


def end_session() -> None:
    session.clear()


def current_context() -> Optional[RequestContext]:
    """Context for the logged-in user, or None when the session is missing or expired.

    The lifetime counts from login; requests do not extend it.
    """
    if "user_id" not in session:
        return None

    issued_at = session.get("issued_at")
    ttl = current_app.permanent_session_lifetime.total_seconds()
    if not isinstance(issued_at, (int, float)) or now_local().timestamp() - issued_at > ttl:
        session.clear()
        return None

    return RequestContext(user_id=int(session["user_id"]), username=str(session.get("username", "")))


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        ctx = current_context()
        if ctx is None:
            raise AuthenticationError("Not logged in")
        return view(ctx, *args, **kwargs)

    return wrapper
