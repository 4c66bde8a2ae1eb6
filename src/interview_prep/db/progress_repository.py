"""Repository functions for the user_progress table.

The table holds at most one row per (user_id, question_id); the UNIQUE
constraint backs `upsert_progress`.
"""

from __future__ import annotations

import structlog

from interview_prep.core.models import UserProgress
from interview_prep.db.database import get_db, new_id, utc_now

logger = structlog.get_logger(__name__)


def get_progress(user_id: str, question_id: str) -> UserProgress | None:
    """Get the progress row for (user, question), or None if never saved."""
    with get_db() as conn:
        row = conn.execute(
            "SELECT * FROM user_progress WHERE question_id = ? AND user_id = ?",
            (question_id, user_id),
        ).fetchone()

    if row is None:
        return None

    return UserProgress.from_row(row)


def get_progress_by_id(progress_id: str) -> UserProgress | None:
    with get_db() as conn:
        row = conn.execute(
            "SELECT * FROM user_progress WHERE id = ?", (progress_id,)
        ).fetchone()

    if row is None:
        return None

    return UserProgress.from_row(row)


def list_progress_for_user(user_id: str) -> list[UserProgress]:
    """All progress rows of a user, most recently updated first."""
    with get_db() as conn:
        rows = conn.execute(
            "SELECT * FROM user_progress WHERE user_id = ? ORDER BY updated_at DESC",
            (user_id,),
        ).fetchall()

    return [UserProgress.from_row(row) for row in rows]


def insert_progress(progress: UserProgress) -> UserProgress:
    """Insert a new progress row.

    Raises:
        sqlite3.IntegrityError: If a row for (user, question) already exists
    """
    progress_id = new_id()
    with get_db() as conn:
        conn.execute(
            """
            INSERT INTO user_progress (
                id, user_id, question_id, status, notes, completed_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                progress_id,
                progress.user_id,
                progress.question_id,
                progress.status.value,
                progress.notes,
                progress.completed_at,
                utc_now(),
            ),
        )

    logger.debug("progress.inserted", progress_id=progress_id)
    return _require(progress_id)


def update_progress(progress_id: str, progress: UserProgress) -> UserProgress | None:
    """Overwrite the row with the given ID.

    Returns:
        The updated row, or None if no row has that ID
    """
    with get_db() as conn:
        cursor = conn.execute(
            """
            UPDATE user_progress
            SET user_id = ?, question_id = ?, status = ?, notes = ?,
                completed_at = ?, updated_at = ?
            WHERE id = ?
            """,
            (
                progress.user_id,
                progress.question_id,
                progress.status.value,
                progress.notes,
                progress.completed_at,
                utc_now(),
                progress_id,
            ),
        )
        updated = cursor.rowcount

    if updated == 0:
        return None

    logger.debug("progress.updated", progress_id=progress_id)
    return _require(progress_id)


def upsert_progress(progress: UserProgress) -> UserProgress:
    """Insert or update the row keyed by (user_id, question_id).

    An existing row keeps its ID; only the mutable fields are replaced.
    """
    with get_db() as conn:
        conn.execute(
            """
            INSERT INTO user_progress (
                id, user_id, question_id, status, notes, completed_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(user_id, question_id) DO UPDATE SET
                status = excluded.status,
                notes = excluded.notes,
                completed_at = excluded.completed_at,
                updated_at = excluded.updated_at
            """,
            (
                new_id(),
                progress.user_id,
                progress.question_id,
                progress.status.value,
                progress.notes,
                progress.completed_at,
                utc_now(),
            ),
        )

    stored = get_progress(progress.user_id, progress.question_id)
    if stored is None:
        raise LookupError(
            f"Progress for question '{progress.question_id}' missing after upsert"
        )

    logger.debug("progress.upserted", progress_id=stored.id)
    return stored


def _require(progress_id: str) -> UserProgress:
    stored = get_progress_by_id(progress_id)
    if stored is None:
        raise LookupError(f"Progress '{progress_id}' missing after write")
    return stored
