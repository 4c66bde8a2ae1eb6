"""Tests for health endpoint (F3)."""

from interview_prep import __version__
from interview_prep.db import database


class TestHealthEndpoint:
    """Tests for GET /health."""

    def test_health_returns_ok(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["database_ok"] is True

    def test_health_reports_package_version_and_timestamp(self, client):
        data = client.get("/health").json()
        assert data["version"] == __version__
        assert "T" in data["timestamp"]

    def test_health_reports_database_path(self, client, db):
        data = client.get("/health").json()
        assert data["database"] == str(db)

    def test_unreachable_database_is_degraded(self, client, tmp_path, monkeypatch):
        # A directory cannot be opened as a database file
        monkeypatch.setattr(database, "_db_path", tmp_path)

        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "degraded"
        assert data["database_ok"] is False
        assert data["database"] == str(tmp_path)
