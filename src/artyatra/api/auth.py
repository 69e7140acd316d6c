"""Login, logout and signup endpoints plus the session guard."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, Request, Response, status
from pydantic import BaseModel

from artyatra.api.errors import ApiError
from artyatra.domain.sessions import SessionRecord  # noqa: TC001
from artyatra.services.accounts import SignupRequest  # noqa: TC001
from artyatra.services.sessions import (
    LoginFailedError,
    NotAuthenticatedError,
    SessionExpiredError,
)

if TYPE_CHECKING:
    from artyatra.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


class LoginRequest(BaseModel):
    """Credentials accepted by the Swecha auth API."""

    phone: str
    password: str


async def require_session(
    request: Request, authorization: str | None = Header(default=None)
) -> SessionRecord:
    """Reject requests whose session is missing, idle or past its lifetime."""
    container: AppContainer = request.app.state.container
    try:
        return container.session_service.check(authorization)
    except SessionExpiredError as exc:
        raise ApiError(
            status.HTTP_401_UNAUTHORIZED, "Session expired", reason=exc.reason
        ) from exc
    except NotAuthenticatedError as exc:
        raise ApiError(status.HTTP_401_UNAUTHORIZED, "Not authenticated") from exc


@router.post("/login")
async def login(payload: LoginRequest, request: Request) -> dict[str, object]:
    """Log in through the Swecha auth API and open a session."""
    container: AppContainer = request.app.state.container
    try:
        session = await container.session_service.login(
            payload.phone, payload.password
        )
    except LoginFailedError as exc:
        raise ApiError(exc.status_code, exc.message) from exc
    except Exception as exc:
        logger.exception("Login request failed")
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Login failed", str(exc)
        ) from exc
    settings = container.settings
    return {
        "token": session.token,
        "userId": session.user_id,
        "idleTimeoutMinutes": settings.idle_timeout_minutes,
        "maxSessionMinutes": settings.max_session_minutes,
    }


@router.get("/me")
async def me(
    request: Request, session: SessionRecord = Depends(require_session)
) -> Response:
    """Return the upstream profile of the signed-in user."""
    container: AppContainer = request.app.state.container
    try:
        upstream = await container.session_service.profile(session.token)
    except Exception as exc:
        logger.exception("Profile request failed")
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to fetch profile", str(exc)
        ) from exc
    return Response(
        content=upstream.content,
        status_code=upstream.status_code,
        media_type=upstream.content_type,
    )


@router.post("/logout")
async def logout(
    request: Request, authorization: str | None = Header(default=None)
) -> dict[str, str]:
    """End the caller's session."""
    container: AppContainer = request.app.state.container
    container.session_service.end(authorization)
    return {"status": "signed_out"}


@router.get("/session")
async def session_status(
    request: Request, authorization: str | None = Header(default=None)
) -> dict[str, object]:
    """Report whether the token is live and why it ended if not."""
    container: AppContainer = request.app.state.container
    authenticated, reason = container.session_service.status(authorization)
    return {"authenticated": authenticated, "reason": reason}


@router.post("/signup")
async def signup(payload: SignupRequest, request: Request) -> Response:
    """Create a Swecha account and forward the upstream reply."""
    container: AppContainer = request.app.state.container
    try:
        upstream = await container.account_service.sign_up(payload)
    except Exception as exc:
        logger.exception("Signup request failed")
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Signup failed", str(exc)
        ) from exc
    return Response(
        content=upstream.content,
        status_code=upstream.status_code,
        media_type=upstream.content_type,
    )
