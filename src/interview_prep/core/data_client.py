"""Data client used by the views.

Wraps the repository functions behind the handful of logical operations
the pages consume, and turns storage failures into DataClientError so the
views can report them without knowing about sqlite.
"""

from __future__ import annotations

import sqlite3

import structlog

from interview_prep.core.models import Category, Question, UserProgress
from interview_prep.db import catalog_repository, progress_repository

logger = structlog.get_logger(__name__)


class DataClientError(Exception):
    """Raised when a request to the data store fails."""

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"{operation} failed: {reason}")


class NotFoundError(DataClientError):
    """Raised when a single-row lookup matches nothing."""

    def __init__(self, collection: str, row_id: str):
        self.collection = collection
        self.row_id = row_id
        super().__init__(f"get {collection}", f"no row with id '{row_id}'")


class DataClient:
    """Filtered read/insert/update against categories, questions and user_progress."""

    def list_categories(self) -> list[Category]:
        """All categories ordered by name."""
        try:
            return catalog_repository.list_categories()
        except sqlite3.Error as e:
            raise self._failure("list categories", e) from e

    def list_questions(self, category_id: str | None = None) -> list[Question]:
        """Questions newest first, optionally filtered to one category."""
        try:
            return catalog_repository.list_questions(category_id)
        except sqlite3.Error as e:
            raise self._failure("list questions", e) from e

    def get_question(self, question_id: str) -> Question:
        """Exactly one question.

        Raises:
            NotFoundError: If no question has this ID
        """
        try:
            question = catalog_repository.get_question_by_id(question_id)
        except sqlite3.Error as e:
            raise self._failure("get question", e) from e

        if question is None:
            raise NotFoundError("questions", question_id)
        return question

    def get_progress(self, user_id: str, question_id: str) -> UserProgress | None:
        """Zero or one progress row for (user, question)."""
        try:
            return progress_repository.get_progress(user_id, question_id)
        except sqlite3.Error as e:
            raise self._failure("get progress", e) from e

    def insert_progress(self, progress: UserProgress) -> UserProgress:
        try:
            return progress_repository.insert_progress(progress)
        except (sqlite3.Error, LookupError) as e:
            raise self._failure("insert progress", e) from e

    def update_progress(self, progress_id: str, progress: UserProgress) -> UserProgress:
        """Update the row with this ID.

        Raises:
            NotFoundError: If the row no longer exists
        """
        try:
            updated = progress_repository.update_progress(progress_id, progress)
        except (sqlite3.Error, LookupError) as e:
            raise self._failure("update progress", e) from e

        if updated is None:
            raise NotFoundError("user_progress", progress_id)
        return updated

    def upsert_progress(self, progress: UserProgress) -> UserProgress:
        """Insert or update keyed by (user, question), in one statement."""
        try:
            return progress_repository.upsert_progress(progress)
        except (sqlite3.Error, LookupError) as e:
            raise self._failure("upsert progress", e) from e

    def _failure(self, operation: str, error: Exception) -> DataClientError:
        logger.warning("data_client.failed", operation=operation, error=str(error))
        return DataClientError(operation, str(error))


_data_client: DataClient | None = None


def get_data_client() -> DataClient:
    """Get the process-wide data client."""
    global _data_client
    if _data_client is None:
        _data_client = DataClient()
    return _data_client
