"""In-memory user registry and session tokens."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from passlib.context import CryptContext

from style_advisor.metrics.prometheus_exporter import active_sessions
from style_advisor.services.errors import (
    ConflictError,
    InvalidInputError,
    NotFoundError,
    UnauthenticatedError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)


class PasswordHasher:
    """Hash and verify credentials through passlib.

    Hashing runs synchronously on the event loop, so a register or login
    completes without interleaving with other handlers.
    """

    def __init__(self, schemes: list[str] | None = None) -> None:
        self._context = CryptContext(schemes=schemes or ["pbkdf2_sha256"], deprecated="auto")

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        return self._context.verify(password, hashed)


@dataclass(slots=True)
class User:
    """Registered account. Profile keys are free-form (height, skinTone, ...)."""

    id: str
    username: str
    password_hash: str
    profile: dict[str, Any] = field(default_factory=dict)
    created_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())


@dataclass(frozen=True, slots=True)
class Session:
    token: str
    user_id: str


def _normalise(username: str) -> str:
    return username.strip().lower()


class UserStore:
    """Holds registered users and the tokens issued to them."""

    def __init__(self, hasher: PasswordHasher | None = None) -> None:
        self._hasher = hasher or PasswordHasher()
        self._users: dict[str, User] = {}
        self._usernames: dict[str, str] = {}
        self._sessions: dict[str, str] = {}

    def _find_by_username(self, username: str) -> User | None:
        user_id = self._usernames.get(_normalise(username))
        return self._users.get(user_id) if user_id else None

    def _open_session(self, user_id: str) -> str:
        token = uuid.uuid4().hex
        self._sessions[token] = user_id
        active_sessions.inc()
        return token

    def register(
        self,
        username: str | None,
        password: str | None,
        profile: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Create an account and return a fresh session for it."""

        if not username or not username.strip() or not password:
            raise InvalidInputError("Username and password are required.")
        if self._find_by_username(username):
            raise ConflictError("Username already taken.")

        user = User(
            id=str(uuid.uuid4()),
            username=username.strip(),
            password_hash=self._hasher.hash(password),
            profile=dict(profile or {}),
        )
        self._users[user.id] = user
        self._usernames[_normalise(user.username)] = user.id
        token = self._open_session(user.id)
        logger.info("Registered user %s", user.id)
        return {"token": token, "userId": user.id, "username": user.username}

    def login(self, username: str | None, password: str | None) -> dict[str, Any]:
        """Verify credentials and issue a new token."""

        if not username or not password:
            raise InvalidInputError("Username and password are required.")

        user = self._find_by_username(username)
        if user is None or not self._hasher.verify(password, user.password_hash):
            raise UnauthorizedError("Invalid username or password.")

        token = self._open_session(user.id)
        return {
            "token": token,
            "userId": user.id,
            "username": user.username,
            "profile": user.profile,
        }

    def logout(self, token: str | None) -> None:
        """Drop the session if it exists."""

        if token and self._sessions.pop(token, None) is not None:
            active_sessions.dec()

    def resolve_session(self, token: str | None) -> Session:
        if not token or token not in self._sessions:
            raise UnauthenticatedError("Not authenticated.")
        return Session(token=token, user_id=self._sessions[token])

    def _user_for(self, token: str | None) -> User:
        session = self.resolve_session(token)
        user = self._users.get(session.user_id)
        if user is None:
            raise NotFoundError("User not found.")
        return user

    def get_current_user(self, token: str | None) -> dict[str, Any]:
        user = self._user_for(token)
        return {"userId": user.id, "username": user.username, "profile": user.profile}

    def update_profile(self, token: str | None, partial: dict[str, Any]) -> dict[str, Any]:
        """Shallow-merge ``partial`` into the stored profile."""

        user = self._user_for(token)
        user.profile = {**user.profile, **partial}
        return user.profile
