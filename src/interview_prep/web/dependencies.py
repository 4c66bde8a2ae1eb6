"""FastAPI dependencies: data client, auth provider, current session."""

from __future__ import annotations

from typing import Any

from fastapi import Depends, Header, HTTPException, status

from interview_prep.config.app_config import load_app_config
from interview_prep.core.auth import (
    AuthError,
    AuthProvider,
    AuthSession,
    get_auth_provider,
)
from interview_prep.core.data_client import DataClient, get_data_client
from interview_prep.core.view_state import PageView
from interview_prep.web.schemas import NotificationResponse


def data_client() -> DataClient:
    return get_data_client()


def auth_provider() -> AuthProvider:
    return get_auth_provider()


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token.strip()


async def optional_session(
    authorization: str | None = Header(default=None),
    provider: AuthProvider = Depends(auth_provider),
) -> AuthSession | None:
    """Current session, or None when the request is anonymous."""
    try:
        return await provider.get_session(_bearer_token(authorization))
    except AuthError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Auth service unavailable: {e}",
        ) from e


async def require_session(
    session: AuthSession | None = Depends(optional_session),
) -> AuthSession:
    """Current session; anonymous requests are sent to the auth flow."""
    if session is None:
        auth_route = load_app_config().web.auth_route
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Sign in required: {auth_route}",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return session


def page_fields(view: PageView) -> dict[str, Any]:
    """Notifications and redirect of a page controller, ready for a response."""
    return {
        "notifications": [
            NotificationResponse(**n.to_dict()) for n in view.notifications
        ],
        "redirect_to": view.redirect_to,
    }
