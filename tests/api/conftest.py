"""Fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from exercise_tracker.api import deps
from exercise_tracker.main import app


@pytest.fixture
def client(db):
    """Create a test client whose services use the temporary database."""
    app.dependency_overrides[deps.get_database] = lambda: db

    yield TestClient(app)

    app.dependency_overrides.pop(deps.get_database, None)


@pytest.fixture
def user_id(client):
    """Register alice and return the new user id."""
    response = client.post("/api/users", json={"username": "alice"})
    assert response.status_code == 200
    return response.json()["_id"]
