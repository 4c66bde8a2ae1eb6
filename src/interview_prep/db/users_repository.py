"""Repository functions for the users and auth_sessions tables."""

from __future__ import annotations

import secrets
from dataclasses import dataclass

import structlog

from interview_prep.db.database import get_db, new_id, utc_now

logger = structlog.get_logger(__name__)


@dataclass
class UserRecord:
    """User record from database."""

    id: str
    email: str
    created_at: str


def get_user_by_email(email: str) -> UserRecord | None:
    with get_db() as conn:
        row = conn.execute(
            "SELECT * FROM users WHERE email = ?", (email,)
        ).fetchone()

    if row is None:
        return None

    return UserRecord(id=row["id"], email=row["email"], created_at=row["created_at"])


def get_or_create_user(email: str) -> UserRecord:
    """Get the user with this email, creating it on first use."""
    existing = get_user_by_email(email)
    if existing is not None:
        return existing

    user = UserRecord(id=new_id(), email=email, created_at=utc_now())
    with get_db() as conn:
        conn.execute(
            "INSERT INTO users (id, email, created_at) VALUES (?, ?, ?)",
            (user.id, user.email, user.created_at),
        )

    logger.info("users.created", user_id=user.id)
    return user


def create_auth_session(user_id: str) -> str:
    """Issue a new session token for the user.

    Returns:
        The opaque bearer token
    """
    token = secrets.token_urlsafe(32)
    with get_db() as conn:
        conn.execute(
            "INSERT INTO auth_sessions (token, user_id, created_at) VALUES (?, ?, ?)",
            (token, user_id, utc_now()),
        )
    return token


def get_session_user(token: str) -> UserRecord | None:
    """Resolve a session token to its user, or None if not active."""
    with get_db() as conn:
        row = conn.execute(
            """
            SELECT users.id, users.email, users.created_at
            FROM auth_sessions JOIN users ON users.id = auth_sessions.user_id
            WHERE auth_sessions.token = ?
            """,
            (token,),
        ).fetchone()

    if row is None:
        return None

    return UserRecord(id=row["id"], email=row["email"], created_at=row["created_at"])


def delete_auth_session(token: str) -> bool:
    """Invalidate a session token.

    Returns:
        True if a session was removed, False if the token was unknown
    """
    with get_db() as conn:
        cursor = conn.execute("DELETE FROM auth_sessions WHERE token = ?", (token,))
        return cursor.rowcount > 0
