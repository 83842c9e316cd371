"""
Tests for the Exercise API routes.

Tests cover:
- Appending exercises (JSON and form bodies)
- Log retrieval with date range and limit
- 404 for unknown users
"""

from datetime import datetime

import pytest

from exercise_tracker.utils.dates import format_date


def add(client, user_id, **body):
    return client.post(f"/api/users/{user_id}/exercises", json=body)


@pytest.fixture
def five_runs(client, user_id):
    for day in range(1, 6):
        response = add(client, user_id, description=f"run {day}", duration=10 * day, date=f"2024-03-0{day}")
        assert response.status_code == 200
    return user_id


class TestAddExercise:
    """Tests for POST /api/users/{id}/exercises."""

    def test_scenario(self, client, user_id):
        response = add(client, user_id, description="run", duration=30)

        assert response.status_code == 200
        today = format_date(datetime.now())
        assert response.json() == {
            "username": "alice",
            "description": "run",
            "duration": 30,
            "date": today,
            "_id": user_id,
        }
        assert list(response.json().keys()) == ["username", "description", "duration", "date", "_id"]

        log = client.get(f"/api/users/{user_id}/logs")
        assert log.status_code == 200
        assert log.json() == {
            "username": "alice",
            "count": 1,
            "_id": user_id,
            "log": [{"description": "run", "duration": 30, "date": today}],
        }

    def test_form_body(self, client, user_id):
        response = client.post(
            f"/api/users/{user_id}/exercises",
            data={"description": "yoga", "duration": "45", "date": "2024-02-29"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["duration"] == 45
        assert data["date"] == "Thu Feb 29 2024"

    def test_fractional_duration(self, client, user_id):
        assert add(client, user_id, description="walk", duration=12.5).json()["duration"] == 12.5

    def test_invalid_date_accepted(self, client, user_id):
        response = add(client, user_id, description="run", duration=30, date="whenever")

        assert response.status_code == 200
        assert response.json()["date"] == "Invalid Date"

    @pytest.mark.parametrize("body", [
        {"duration": 30},
        {"description": "run"},
        {"description": "", "duration": 30},
        {"description": "run", "duration": 0},
    ])
    def test_missing_fields(self, client, user_id, body):
        response = add(client, user_id, **body)

        assert response.status_code == 400
        assert response.json() == {"error": "description and duration are required"}

    def test_non_numeric_duration(self, client, user_id):
        response = add(client, user_id, description="run", duration="lots")

        assert response.status_code == 500
        assert "Cast to Number failed" in response.json()["error"]

    def test_unknown_user(self, client):
        response = add(client, "0" * 24, description="run", duration=30)

        assert response.status_code == 404
        assert response.json() == {"error": "user not found"}

    def test_malformed_user_id(self, client, db):
        response = add(client, "not-an-id", description="run", duration=30)

        assert response.status_code == 404
        assert response.json() == {"error": "user not found"}
        with db.get_connection() as conn:
            rows = conn.execute("SELECT user_id FROM exercises").fetchall()
        assert rows == []


class TestGetLogs:
    """Tests for GET /api/users/{id}/logs."""

    def test_all_entries(self, client, five_runs):
        data = client.get(f"/api/users/{five_runs}/logs").json()

        assert data["count"] == 5
        assert [e["duration"] for e in data["log"]] == [10, 20, 30, 40, 50]
        assert data["log"][0] == {"description": "run 1", "duration": 10, "date": "Fri Mar 01 2024"}

    def test_date_range(self, client, five_runs):
        data = client.get(
            f"/api/users/{five_runs}/logs",
            params={"from": "2024-03-02", "to": "2024-03-04"},
        ).json()

        assert data["count"] == 3
        assert [e["description"] for e in data["log"]] == ["run 2", "run 3", "run 4"]

    def test_limit(self, client, five_runs):
        data = client.get(f"/api/users/{five_runs}/logs", params={"limit": 2}).json()

        assert data["count"] == 2
        assert len(data["log"]) == 2

    @pytest.mark.parametrize("limit", ["0", "", "abc"])
    def test_limit_without_cap(self, client, five_runs, limit):
        data = client.get(f"/api/users/{five_runs}/logs", params={"limit": limit}).json()

        assert data["count"] == 5

    def test_range_and_limit(self, client, five_runs):
        data = client.get(
            f"/api/users/{five_runs}/logs",
            params={"from": "2024-03-02", "limit": "2"},
        ).json()

        assert [e["description"] for e in data["log"]] == ["run 2", "run 3"]
        assert data["count"] == 2

    def test_malformed_range(self, client, five_runs):
        response = client.get(f"/api/users/{five_runs}/logs", params={"from": "garbage"})

        assert response.status_code == 200
        assert response.json()["count"] == 0

    def test_unknown_user(self, client):
        response = client.get(f"/api/users/{'0' * 24}/logs")

        assert response.status_code == 404
        assert response.json() == {"error": "user not found"}

    def test_orphaned_entry_not_visible_to_others(self, client, user_id):
        add(client, "0" * 24, description="ghost", duration=1)

        assert client.get(f"/api/users/{user_id}/logs").json()["count"] == 0
