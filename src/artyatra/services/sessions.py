"""Session lifecycle for Swecha bearer tokens.

Expiry is checked by comparing timestamps on every privileged request rather
than by running timers. A session ends when it has been idle for longer than
the idle timeout, or when it is older than the max lifetime regardless of
activity. The end reason is reported once, by whichever call first sees the
expired or logged-out token.
"""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol

from artyatra.adapters.swecha_auth_client import SwechaAuthClient
from artyatra.domain.sessions import SessionRecord
from artyatra.domain.uploads import UpstreamResponse

logger = logging.getLogger(__name__)

IDLE_REASON = "Your session expired due to inactivity. Please sign in again."
MAX_REASON = "Your session has ended. Please sign in again."
LOGOUT_REASON = "You have been signed out."

_TOKEN_KEYS = ("token", "access_token", "jwt", "id_token")


class NotAuthenticatedError(PermissionError):
    """Raised when a request carries no known session token."""


class SessionExpiredError(PermissionError):
    """Raised when a session has passed its idle or max lifetime."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class LoginFailedError(RuntimeError):
    """Raised when the auth API rejects a login."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class SessionRepository(Protocol):
    """Persistence interface for active sessions and logout reasons."""

    def get_session(self, token: str) -> SessionRecord | None:
        """Return the session for a token, if present."""

    def list_sessions(self) -> list[SessionRecord]:
        """Return every stored session."""

    def save_session(self, session: SessionRecord) -> None:
        """Create or replace a session."""

    def delete_session(self, token: str) -> None:
        """Remove a session."""

    def set_reason(self, token: str, reason: str) -> None:
        """Record why a session ended."""

    def pop_reason(self, token: str) -> str | None:
        """Return and forget the recorded reason for a token."""


@dataclass
class InMemorySessionRepository(SessionRepository):
    """Process-memory session store."""

    sessions: dict[str, SessionRecord] = field(default_factory=dict)
    reasons: dict[str, str] = field(default_factory=dict)

    def get_session(self, token: str) -> SessionRecord | None:
        return self.sessions.get(token)

    def list_sessions(self) -> list[SessionRecord]:
        return list(self.sessions.values())

    def save_session(self, session: SessionRecord) -> None:
        self.sessions[session.token] = session

    def delete_session(self, token: str) -> None:
        self.sessions.pop(token, None)

    def set_reason(self, token: str, reason: str) -> None:
        self.reasons[token] = reason

    def pop_reason(self, token: str) -> str | None:
        return self.reasons.pop(token, None)


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class SessionService:
    """Tracks login, activity and expiry of bearer tokens."""

    auth_client: SwechaAuthClient
    repository: SessionRepository
    idle_timeout: timedelta | None
    max_session: timedelta | None
    clock: Callable[[], datetime] = _utcnow

    async def login(self, phone: str, password: str) -> SessionRecord:
        """Log in against the auth API and open a session for the token."""
        reply = await self.auth_client.login(phone, password)
        data = reply.json()
        if not reply.ok:
            raise LoginFailedError(reply.status_code, _error_detail(data, reply))
        token = to_bearer(_extract_token(data, reply))
        user_id = await self._resolve_user_id(token)
        return self.start(token, user_id)

    def start(self, token: str, user_id: str | None = None) -> SessionRecord:
        """Open a session; the max lifetime is counted from now."""
        now = self.clock()
        self._prune(now)
        session = SessionRecord(
            token=token, user_id=user_id, started_at=now, last_activity_at=now
        )
        self.repository.save_session(session)
        self.repository.pop_reason(token)
        return session

    def check(self, authorization: str | None) -> SessionRecord:
        """Validate a session and record activity on it.

        Raises ``NotAuthenticatedError`` for unknown tokens and
        ``SessionExpiredError`` once a timeout has passed. The end reason is
        reported by exactly one call; later calls see an unknown token.
        """
        if not authorization:
            raise NotAuthenticatedError("Not authenticated")
        token = to_bearer(authorization)
        session = self.repository.get_session(token)
        if session is None:
            reason = self.repository.pop_reason(token)
            if reason:
                raise SessionExpiredError(reason)
            raise NotAuthenticatedError("Not authenticated")
        now = self.clock()
        reason = self._expire_if_due(session, now)
        if reason:
            raise SessionExpiredError(reason)
        touched = SessionRecord(
            token=session.token,
            user_id=session.user_id,
            started_at=session.started_at,
            last_activity_at=now,
        )
        self.repository.save_session(touched)
        return touched

    def end(self, authorization: str | None) -> None:
        """Log out the session behind a token, if any."""
        if authorization:
            token = to_bearer(authorization)
            self.repository.delete_session(token)
            self.repository.set_reason(token, LOGOUT_REASON)

    def status(self, authorization: str | None) -> tuple[bool, str | None]:
        """Return whether the token is live and, if not, why it ended.

        Does not count as activity.
        """
        if not authorization:
            return False, None
        token = to_bearer(authorization)
        session = self.repository.get_session(token)
        if session is None:
            return False, self.repository.pop_reason(token)
        reason = self._expire_if_due(session, self.clock())
        if reason:
            return False, reason
        return True, None

    async def profile(self, authorization: str) -> UpstreamResponse:
        """Fetch the upstream profile for a token."""
        return await self.auth_client.me(to_bearer(authorization))

    def _expiry_reason(self, session: SessionRecord, now: datetime) -> str | None:
        if self.max_session and now - session.started_at >= self.max_session:
            return MAX_REASON
        if self.idle_timeout and now - session.last_activity_at >= self.idle_timeout:
            return IDLE_REASON
        return None

    def _expire_if_due(self, session: SessionRecord, now: datetime) -> str | None:
        reason = self._expiry_reason(session, now)
        if reason:
            self.repository.delete_session(session.token)
            logger.info("Session expired", extra={"user_id": session.user_id})
        return reason

    def _prune(self, now: datetime) -> None:
        for session in self.repository.list_sessions():
            if self._expiry_reason(session, now):
                self.repository.delete_session(session.token)

    async def _resolve_user_id(self, token: str) -> str | None:
        try:
            reply = await self.auth_client.me(token)
        except Exception:
            logger.exception("Failed to fetch Swecha profile")
            return None
        data = reply.json()
        if reply.ok and isinstance(data, dict) and data.get("id") is not None:
            return str(data["id"])
        return None


def timeout_from_minutes(minutes: int) -> timedelta | None:
    """Convert a configured minute count into a timeout; 0 disables it."""
    return timedelta(minutes=minutes) if minutes > 0 else None


def to_bearer(value: str) -> str:
    """Normalize a raw token or header value into ``Bearer <token>``."""
    cleaned = str(value).strip().strip('"')
    if not cleaned:
        return ""
    if cleaned.lower().startswith("bearer "):
        return cleaned
    return f"Bearer {cleaned}"


def _extract_token(data: object, reply: UpstreamResponse) -> str:
    if isinstance(data, dict):
        for key in _TOKEN_KEYS:
            value = data.get(key)
            if isinstance(value, str) and value:
                return value
    header = reply.headers.get("authorization")
    if header:
        return header
    return json.dumps(data)


def _error_detail(data: object, reply: UpstreamResponse) -> str:
    if isinstance(data, dict):
        detail = data.get("detail") or data.get("message")
        if detail:
            return str(detail)
    return f"Login failed ({reply.status_code})"
