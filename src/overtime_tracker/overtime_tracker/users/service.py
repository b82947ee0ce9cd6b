from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_max_length, require_min_length, require_non_empty
from ..core.constants import MAX_USERNAME_LENGTH, MIN_PASSWORD_LENGTH
from ..core.exceptions import AuthenticationError, ValidationError
from .repository import UserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    user_id: int
    username: str


class AuthService:
    """Use cases: register and authenticate (login)."""

    def __init__(self, users: UserRepository, *, min_password_length: int = MIN_PASSWORD_LENGTH):
        self._users = users
        self._min_password_length = int(min_password_length)

    def register(self, username: str, password: str) -> SessionUser:
        username = require_non_empty(username, "Username")
        require_max_length(username, "Username", MAX_USERNAME_LENGTH)
        require_min_length(password, "Password", self._min_password_length)

        if self._users.get_by_username(username):
            raise ValidationError("Username already taken")

        user_id = self._users.create_user(username=username, password_hash=generate_password_hash(password))
        logger.info("Registered user %s (id=%s)", username, user_id)
        return SessionUser(user_id=user_id, username=username)

    def authenticate(self, username: str, password: str) -> SessionUser:
        if not isinstance(username, str) or not isinstance(password, str):
            raise AuthenticationError(INVALID_CREDENTIALS)
        username = username.strip()
        user = self._users.get_by_username(username) if username else None
        if not user:
            logger.info("Login failed for %r", username)
            raise AuthenticationError(INVALID_CREDENTIALS)

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes or corrupted values
            ok = False

        if not ok:
            logger.info("Login failed for %r", username)
            raise AuthenticationError(INVALID_CREDENTIALS)

        logger.info("User %s logged in", user.username)
        return SessionUser(user_id=user.user_id, username=user.username)
