"""Auth provider: current-user identity and sign-out.

The sign-in flow itself lives outside this app (the /auth route).
`sign_in` here only issues a session for an email and is used by
operator tooling and tests.
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

import structlog

from interview_prep.db import users_repository

logger = structlog.get_logger(__name__)


class AuthError(Exception):
    """Raised when an auth operation cannot be completed.

    Covers both rejected input and an unreachable session store.
    """


@dataclass(frozen=True)
class AuthSession:
    """Identity of the signed-in user, passed explicitly to the views."""

    user_id: str
    email: str
    token: str


class AuthProvider:
    """Resolves bearer tokens to sessions and invalidates them on sign-out."""

    async def get_session(self, token: str | None) -> AuthSession | None:
        """Resolve the current session, or None if signed out.

        Raises:
            AuthError: If the session store cannot be read
        """
        if not token:
            return None

        try:
            user = users_repository.get_session_user(token)
        except sqlite3.Error as e:
            raise _store_failure("get session", e) from e

        if user is None:
            return None

        return AuthSession(user_id=user.id, email=user.email, token=token)

    async def sign_in(self, email: str) -> AuthSession:
        """Issue a session for the given email.

        Raises:
            AuthError: If the email is empty or malformed, or the store fails
        """
        email = email.strip().lower()
        if not email or "@" not in email:
            raise AuthError(f"Invalid email '{email}'")

        try:
            user = users_repository.get_or_create_user(email)
            token = users_repository.create_auth_session(user.id)
        except sqlite3.Error as e:
            raise _store_failure("sign in", e) from e

        logger.info("auth.signed_in", user_id=user.id)
        return AuthSession(user_id=user.id, email=user.email, token=token)

    async def sign_out(self, session: AuthSession) -> bool:
        """Invalidate the session.

        Returns:
            True if the session was active, False if it was already gone

        Raises:
            AuthError: If the session store cannot be written
        """
        try:
            removed = users_repository.delete_auth_session(session.token)
        except sqlite3.Error as e:
            raise _store_failure("sign out", e) from e

        logger.info("auth.signed_out", user_id=session.user_id, removed=removed)
        return removed


def _store_failure(operation: str, error: Exception) -> AuthError:
    logger.warning("auth.store_failed", operation=operation, error=str(error))
    return AuthError(f"{operation} failed: {error}")


# Global provider instance
_auth_provider: AuthProvider | None = None


def get_auth_provider() -> AuthProvider:
    """Get the global auth provider."""
    global _auth_provider
    if _auth_provider is None:
        _auth_provider = AuthProvider()
    return _auth_provider


def reset_auth_provider() -> None:
    """Reset the global auth provider (for testing)."""
    global _auth_provider
    _auth_provider = None
