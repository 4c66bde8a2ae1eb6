"""Fixtures for F3 tests - Web API, CLI and configuration."""

import pytest
from fastapi.testclient import TestClient

from interview_prep.config.app_config import clear_config_cache
from interview_prep.core.auth import reset_auth_provider
from interview_prep.db import catalog_repository
from interview_prep.db.database import init_db
from interview_prep.db.users_repository import create_auth_session, get_or_create_user
from interview_prep.web.api import create_app


@pytest.fixture
def db(tmp_path, monkeypatch):
    """Isolated working directory and database."""
    db_path = tmp_path / "db" / "test.db"
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("INTERVIEW_PREP_DB", str(db_path))
    clear_config_cache()
    reset_auth_provider()
    init_db(db_path)
    yield db_path
    clear_config_cache()
    reset_auth_provider()


@pytest.fixture
def catalog(db):
    catalog_repository.insert_category(name="Behavioral", icon="Users", category_id="c1")
    catalog_repository.insert_category(name="System Design", icon="Network", category_id="c2")
    catalog_repository.insert_question(
        title="Tell me about yourself",
        category_id="c1",
        difficulty="easy",
        tips="Keep it short.",
        question_id="q1",
    )
    return db


@pytest.fixture
def client(catalog):
    """Test client over a seeded catalog."""
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(db) -> dict[str, str]:
    user = get_or_create_user("ana@example.com")
    token = create_auth_session(user.id)
    return {"Authorization": f"Bearer {token}"}
