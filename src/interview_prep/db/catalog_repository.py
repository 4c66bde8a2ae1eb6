"""Repository functions for the categories and questions tables.

The views only read these tables; the insert functions exist for
out-of-band seeding (see `prep seed`).
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from typing import Generator

import structlog

from interview_prep.core.models import Category, Question
from interview_prep.db.database import get_db, new_id, utc_now

logger = structlog.get_logger(__name__)


@contextmanager
def _connection(
    conn: sqlite3.Connection | None,
) -> Generator[sqlite3.Connection, None, None]:
    """Use the given connection, or open (and commit) a fresh one."""
    if conn is not None:
        yield conn
        return
    with get_db() as own:
        yield own


def list_categories() -> list[Category]:
    """All categories ordered by name."""
    with get_db() as conn:
        rows = conn.execute("SELECT * FROM categories ORDER BY name ASC").fetchall()

    return [Category.from_row(row) for row in rows]


def list_questions(category_id: str | None = None) -> list[Question]:
    """Questions ordered newest first, optionally limited to one category.

    Args:
        category_id: Exact category reference to filter on. None lists all.
    """
    query = "SELECT * FROM questions"
    params: tuple[str, ...] = ()
    if category_id is not None:
        query += " WHERE category_id = ?"
        params = (category_id,)
    query += " ORDER BY created_at DESC, rowid DESC"

    with get_db() as conn:
        rows = conn.execute(query, params).fetchall()

    return [Question.from_row(row) for row in rows]


def get_question_by_id(question_id: str) -> Question | None:
    """Get question by ID.

    Returns:
        Question if found, None otherwise
    """
    with get_db() as conn:
        row = conn.execute(
            "SELECT * FROM questions WHERE id = ?", (question_id,)
        ).fetchone()

    if row is None:
        return None

    return Question.from_row(row)


def insert_category(
    name: str,
    description: str = "",
    icon: str = "Code",
    category_id: str | None = None,
    conn: sqlite3.Connection | None = None,
) -> Category:
    """Insert a category record.

    Args:
        conn: Open connection to write through; the caller owns the commit.
            When None, the row is committed on its own connection.

    Raises:
        sqlite3.IntegrityError: If category_id already exists
    """
    category = Category(
        id=category_id or new_id(),
        name=name,
        description=description,
        icon=icon,
    )
    with _connection(conn) as db:
        db.execute(
            "INSERT INTO categories (id, name, description, icon) VALUES (?, ?, ?, ?)",
            (category.id, category.name, category.description, category.icon),
        )

    logger.debug("categories.inserted", category_id=category.id)
    return category


def insert_question(
    title: str,
    category_id: str | None,
    difficulty: str = "",
    description: str = "",
    tips: str = "",
    example_answer: str = "",
    question_id: str | None = None,
    created_at: str | None = None,
    conn: sqlite3.Connection | None = None,
) -> Question:
    """Insert a question record.

    Args:
        conn: Open connection to write through (see insert_category)

    Raises:
        sqlite3.IntegrityError: If question_id exists or category is unknown
    """
    question = Question(
        id=question_id or new_id(),
        title=title,
        description=description,
        difficulty=difficulty,
        category_id=category_id,
        tips=tips,
        example_answer=example_answer,
        created_at=created_at or utc_now(),
    )
    with _connection(conn) as db:
        db.execute(
            """
            INSERT INTO questions (
                id, title, description, difficulty, category_id,
                tips, example_answer, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                question.id,
                question.title,
                question.description,
                question.difficulty,
                question.category_id,
                question.tips,
                question.example_answer,
                question.created_at,
            ),
        )

    logger.debug("questions.inserted", question_id=question.id)
    return question
