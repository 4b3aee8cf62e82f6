import pytest
from fastapi.testclient import TestClient

from pitch_planner_api.app.core.config import settings
from pitch_planner_api.app.core.db import init_db
from pitch_planner_api.app.main import app


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = tmp_path / "pitch_planner_test.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    init_db()
    return path


@pytest.fixture
def client(db_path):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def login_as(client):
    """Register ``login`` and return headers carrying its bearer token."""

    def _login_as(login, password="secret-pass"):
        client.post("/api/register", json={"login": login, "password": password})
        response = client.post("/api/authenticate", json={"username": login, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['id_token']}"}

    return _login_as


@pytest.fixture
def auth_headers(login_as):
    return login_as("alice")
