"""Fixtures for F2 tests - auth provider and page controllers."""

import pytest

from interview_prep.core.auth import AuthSession, reset_auth_provider
from interview_prep.core.data_client import DataClient, DataClientError
from interview_prep.db import catalog_repository
from interview_prep.db.database import init_db
from interview_prep.db.users_repository import create_auth_session, get_or_create_user


@pytest.fixture
def db(tmp_path):
    """Fresh database with schema."""
    db_path = tmp_path / "test.db"
    init_db(db_path)
    reset_auth_provider()
    yield db_path
    reset_auth_provider()


@pytest.fixture
def catalog(db):
    """Behavioral (c1) with one easy question, System Design (c2) empty."""
    catalog_repository.insert_category(
        name="Behavioral", description="Soft skills", icon="Users", category_id="c1"
    )
    catalog_repository.insert_category(
        name="System Design", description="Architecture", icon="Network", category_id="c2"
    )
    catalog_repository.insert_question(
        title="Tell me about yourself",
        category_id="c1",
        difficulty="easy",
        description="Give a short professional summary.",
        tips="Present, past, future.",
        example_answer="I'm a backend engineer...",
        question_id="q1",
        created_at="2024-01-01T00:00:00+00:00",
    )
    return db


@pytest.fixture
def session(db) -> AuthSession:
    """Signed-in session for a stored user."""
    user = get_or_create_user("ana@example.com")
    token = create_auth_session(user.id)
    return AuthSession(user_id=user.id, email=user.email, token=token)


class RecordingClient(DataClient):
    """DataClient that records progress writes."""

    def __init__(self):
        self.writes: list[tuple[str, str | None]] = []

    def insert_progress(self, progress):
        self.writes.append(("insert", None))
        return super().insert_progress(progress)

    def upsert_progress(self, progress):
        self.writes.append(("upsert", None))
        return super().upsert_progress(progress)

    def update_progress(self, progress_id, progress):
        self.writes.append(("update", progress_id))
        return super().update_progress(progress_id, progress)


class FailingClient(DataClient):
    """DataClient whose selected operations fail."""

    def __init__(self, failing: set[str]):
        self.failing = failing

    def _maybe_fail(self, operation: str) -> None:
        if operation in self.failing:
            raise DataClientError(operation, "connection refused")

    def list_categories(self):
        self._maybe_fail("list_categories")
        return super().list_categories()

    def list_questions(self, category_id=None):
        self._maybe_fail("list_questions")
        return super().list_questions(category_id)

    def get_question(self, question_id):
        self._maybe_fail("get_question")
        return super().get_question(question_id)

    def get_progress(self, user_id, question_id):
        self._maybe_fail("get_progress")
        return super().get_progress(user_id, question_id)

    def upsert_progress(self, progress):
        self._maybe_fail("upsert_progress")
        return super().upsert_progress(progress)

    def update_progress(self, progress_id, progress):
        self._maybe_fail("update_progress")
        return super().update_progress(progress_id, progress)


@pytest.fixture
def recording_client() -> RecordingClient:
    return RecordingClient()


@pytest.fixture
def failing_client():
    """Factory for a client failing the named operations."""
    return lambda *ops: FailingClient(set(ops))
