"""Fixtures for F1 tests - models, repositories and data client."""

import pytest

from interview_prep.db import catalog_repository
from interview_prep.db.database import init_db
from interview_prep.db.users_repository import get_or_create_user


@pytest.fixture
def db(tmp_path):
    """Fresh database with schema."""
    db_path = tmp_path / "test.db"
    init_db(db_path)
    return db_path


@pytest.fixture
def catalog(db):
    """Two categories and one question in the first."""
    catalog_repository.insert_category(
        name="Behavioral", icon="Users", category_id="c1"
    )
    catalog_repository.insert_category(
        name="System Design", icon="Network", category_id="c2"
    )
    catalog_repository.insert_question(
        title="Tell me about yourself",
        category_id="c1",
        difficulty="easy",
        question_id="q1",
        created_at="2024-01-01T00:00:00+00:00",
    )
    return db


@pytest.fixture
def user(db):
    """A stored user."""
    return get_or_create_user("ana@example.com")
