"""Tests for the backend HTTP API."""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from fastapi.testclient import TestClient

from backend import app as backend_app
from backend.session_store import SessionStore


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(backend_app, "session_store", SessionStore(max_sessions=2))
    with TestClient(backend_app.app) as client:
        yield client


@pytest.fixture
def session_id(client):
    response = client.post("/forms/registration/sessions")
    assert response.status_code == 200
    return response.json()["session_id"]


class TestInfoEndpoints:
    def test_health(self, client):
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["forms_loaded"] >= 1

    def test_list_forms(self, client):
        ids = [f["id"] for f in client.get("/forms").json()]
        assert "registration" in ids

    def test_get_form(self, client):
        data = client.get("/forms/registration").json()
        assert data["field_count"] == 4

    def test_unknown_form(self, client):
        assert client.get("/forms/nope").status_code == 404
        assert client.post("/forms/nope/sessions").status_code == 404


class TestSessionEndpoints:
    def test_new_session_is_empty(self, client, session_id):
        data = client.get(f"/sessions/{session_id}").json()
        assert data["values"] == {"fullName": "", "phoneNumber": "", "email": "", "age": ""}
        assert data["submit_attempted"] is False
        assert data["fields"]["fullName"]["touched"] is False

    def test_change_sanitizes(self, client, session_id):
        data = client.post(
            f"/sessions/{session_id}/change",
            json={"field": "phoneNumber", "value": "0912-345-6789"},
        ).json()
        assert data["values"]["phoneNumber"] == "09123456789"
        assert data["fields"]["phoneNumber"]["char_count"] == 11

    def test_blur_reports_error(self, client, session_id):
        client.post(f"/sessions/{session_id}/change", json={"field": "email", "value": "a@b"})
        data = client.post(f"/sessions/{session_id}/blur", json={"field": "email"}).json()
        assert data["fields"]["email"]["is_invalid"] is True
        assert "email" in data["errors"]

    def test_submit_and_reset(self, client, session_id):
        client.post(f"/sessions/{session_id}/change", json={"field": "fullName", "value": "Ali"})
        data = client.post(f"/sessions/{session_id}/submit").json()
        assert data["submit_succeeded"] is False
        assert data["errors"] == {"phoneNumber": "Phone number is required"}

        client.post(f"/sessions/{session_id}/change", json={"field": "phoneNumber", "value": "09123456789"})
        data = client.post(f"/sessions/{session_id}/submit").json()
        assert data["submit_succeeded"] is True

        data = client.post(f"/sessions/{session_id}/reset").json()
        assert data["submit_attempted"] is False
        assert data["values"]["fullName"] == ""

    def test_unknown_field(self, client, session_id):
        response = client.post(f"/sessions/{session_id}/change", json={"field": "nickname", "value": "x"})
        assert response.status_code == 404

    def test_unknown_session(self, client):
        assert client.get("/sessions/missing").status_code == 404
        assert client.post("/sessions/missing/submit").status_code == 404

    def test_close_session(self, client, session_id):
        assert client.delete(f"/sessions/{session_id}").status_code == 200
        assert client.get(f"/sessions/{session_id}").status_code == 404

    def test_oldest_session_evicted(self, client):
        first = client.post("/forms/registration/sessions").json()["session_id"]
        client.post("/forms/registration/sessions")
        client.post("/forms/registration/sessions")
        assert client.get(f"/sessions/{first}").status_code == 404
