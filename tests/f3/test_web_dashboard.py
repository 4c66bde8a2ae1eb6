"""Tests for dashboard endpoints (F3)."""

from interview_prep.db import database


class TestDashboardAuth:
    def test_requires_session(self, client):
        response = client.get("/dashboard")
        assert response.status_code == 401
        assert "/auth" in response.json()["detail"]

    def test_non_bearer_header_rejected(self, client):
        response = client.get("/dashboard", headers={"Authorization": "Basic abc"})
        assert response.status_code == 401

    def test_unreachable_session_store_is_503(
        self, client, auth_headers, tmp_path, monkeypatch
    ):
        monkeypatch.setattr(database, "_db_path", tmp_path / "empty.db")

        response = client.get("/dashboard", headers=auth_headers)

        assert response.status_code == 503
        assert "Auth service unavailable" in response.json()["detail"]


class TestDashboardPage:
    """Tests for GET /dashboard."""

    def test_lists_categories_and_questions(self, client, auth_headers):
        response = client.get("/dashboard", headers=auth_headers)
        assert response.status_code == 200
        data = response.json()

        assert data["loading"] is False
        assert data["user_email"] == "ana@example.com"
        assert [c["name"] for c in data["categories"]] == ["Behavioral", "System Design"]
        assert data["categories"][0]["icon"] == "Users"
        assert data["heading"] == "All Questions"
        assert data["question_count"] == 1
        assert data["questions"][0]["badge"] == "success"
        assert data["questions"][0]["href"] == "/question/q1"
        assert data["empty_message"] is None

    def test_filter_to_empty_category(self, client, auth_headers):
        data = client.get(
            "/dashboard", params={"category_id": "c2"}, headers=auth_headers
        ).json()

        assert data["questions"] == []
        assert data["empty_message"] == "No questions found in this category"
        assert data["heading"] == "System Design Questions"
        assert [c["active"] for c in data["categories"]] == [False, True]

    def test_filter_to_category(self, client, auth_headers):
        data = client.get(
            "/dashboard", params={"category_id": "c1"}, headers=auth_headers
        ).json()
        assert [q["id"] for q in data["questions"]] == ["q1"]
        assert data["selected_category_id"] == "c1"


class TestSignOut:
    """Tests for POST /dashboard/sign-out."""

    def test_sign_out_redirects_and_invalidates(self, client, auth_headers):
        response = client.post("/dashboard/sign-out", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["redirect_to"] == "/"

        assert client.get("/dashboard", headers=auth_headers).status_code == 401

    def test_sign_out_requires_session(self, client):
        assert client.post("/dashboard/sign-out").status_code == 401
