"""
Integration tests for the /api/users endpoints.

Exercises the full HTTP path (routing, body parsing, use cases, response
models and error handlers) with fake repositories in place of Supabase.
"""
from datetime import datetime, timezone
import uuid

import pytest

from application.validation import format_date

pytestmark = pytest.mark.integration


@pytest.fixture
def user_repo(app_with_fake_repos):
    return app_with_fake_repos["user_repo"]


@pytest.fixture
def exercise_repo(app_with_fake_repos):
    return app_with_fake_repos["exercise_repo"]


@pytest.fixture
def user(api_client):
    response = api_client.post("/api/users", json={"username": "ada"})
    assert response.status_code == 200
    return response.json()


def _log_exercise(api_client, user_id, **fields):
    return api_client.post(f"/api/users/{user_id}/exercises", json=fields)


# =============================================================================
# POST /api/users
# =============================================================================


class TestCreateUser:
    """Tests for POST /api/users."""

    def test_creates_user(self, api_client, user_repo):
        response = api_client.post("/api/users", json={"username": "ada"})

        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"id", "username"}
        assert data["username"] == "ada"
        uuid.UUID(data["id"])
        assert user_repo.count == 1

    def test_same_username_returns_same_user(self, api_client, user_repo):
        first = api_client.post("/api/users", json={"username": "ada"}).json()
        second = api_client.post("/api/users", json={"username": "ada"}).json()

        assert first == second
        assert user_repo.count == 1

    def test_form_body(self, api_client):
        response = api_client.post("/api/users", data={"username": "grace"})

        assert response.status_code == 200
        assert response.json()["username"] == "grace"

    @pytest.mark.parametrize("body", [{}, {"username": ""}, {"username": "   "}, {"username": None}])
    def test_blank_username_is_400(self, api_client, user_repo, body):
        response = api_client.post("/api/users", json=body)

        assert response.status_code == 400
        assert "error" in response.json()
        assert user_repo.count == 0

    def test_malformed_json_is_400(self, api_client):
        response = api_client.post(
            "/api/users",
            content=b"{oops",
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 400

    def test_store_failure_is_500(self, api_client, user_repo):
        user_repo.fail_on.add("create")

        response = api_client.post("/api/users", json={"username": "ada"})

        assert response.status_code == 500
        assert response.json() == {"error": "Server error"}


# =============================================================================
# GET /api/users
# =============================================================================


class TestListUsers:
    """Tests for GET /api/users."""

    def test_empty_list(self, api_client):
        response = api_client.get("/api/users")

        assert response.status_code == 200
        assert response.json() == []

    def test_lists_created_users(self, api_client):
        created = [
            api_client.post("/api/users", json={"username": name}).json()
            for name in ("ada", "grace")
        ]

        response = api_client.get("/api/users")

        assert response.status_code == 200
        assert sorted(response.json(), key=lambda u: u["username"]) == created

    def test_store_failure_is_500(self, api_client, user_repo):
        user_repo.fail_on.add("list_all")

        response = api_client.get("/api/users")

        assert response.status_code == 500
        assert response.json() == {"error": "Server error"}


# =============================================================================
# POST /api/users/{id}/exercises
# =============================================================================


class TestAddExercise:
    """Tests for POST /api/users/{id}/exercises."""

    def test_logs_exercise(self, api_client, user):
        response = _log_exercise(api_client, user["id"], description="Run", duration="30", date="2024-01-01")

        assert response.status_code == 200
        assert response.json() == {
            "id": user["id"],
            "username": "ada",
            "description": "Run",
            "duration": 30,
            "date": "Mon Jan 01 2024",
        }

    def test_form_body(self, api_client, user):
        response = api_client.post(
            f"/api/users/{user['id']}/exercises",
            data={"description": "Swim", "duration": "45", "date": "2024-02-29"},
        )

        assert response.status_code == 200
        assert response.json()["duration"] == 45
        assert response.json()["date"] == "Thu Feb 29 2024"

    def test_default_date_is_today(self, api_client, user):
        response = _log_exercise(api_client, user["id"], description="Run", duration=10)

        assert response.status_code == 200
        assert response.json()["date"] == format_date(datetime.now(timezone.utc))

    def test_malformed_id_is_400(self, api_client):
        response = _log_exercise(api_client, "not-an-id", description="Run", duration="30")

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid user ID"}

    def test_unknown_user_is_404(self, api_client):
        response = _log_exercise(api_client, str(uuid.uuid4()), description="Run", duration="30")

        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}

    @pytest.mark.parametrize("fields", [
        {"duration": "30"},
        {"description": "", "duration": "30"},
        {"description": "Run"},
        {"description": "Run", "duration": ""},
    ])
    def test_missing_fields_is_400(self, api_client, user, exercise_repo, fields):
        response = _log_exercise(api_client, user["id"], **fields)

        assert response.status_code == 400
        assert response.json() == {"error": "Description and duration are required"}
        assert exercise_repo.all == []

    @pytest.mark.parametrize("date", [
        "soon",
        "01/02/2024",
        "January 1, 2024",
        "9999-12-31T23:30:00-01:00",
    ])
    def test_invalid_date_is_400(self, api_client, user, exercise_repo, date):
        response = _log_exercise(api_client, user["id"], description="Run", duration="30", date=date)

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid date format"}
        assert exercise_repo.all == []

    def test_rendered_date_is_accepted(self, api_client, user):
        response = _log_exercise(
            api_client, user["id"], description="Run", duration="30", date="Mon Jan 01 2024",
        )

        assert response.status_code == 200
        assert response.json()["date"] == "Mon Jan 01 2024"

    def test_invalid_duration_is_400(self, api_client, user):
        response = _log_exercise(api_client, user["id"], description="Run", duration="long")

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid duration"}

    def test_insert_failure_is_500(self, api_client, user, exercise_repo):
        exercise_repo.fail_on.add("create")

        response = _log_exercise(api_client, user["id"], description="Run", duration="30")

        assert response.status_code == 500
        assert response.json() == {"error": "Server error"}


# =============================================================================
# GET /api/users/{id}/logs
# =============================================================================


class TestGetLogs:
    """Tests for GET /api/users/{id}/logs."""

    @pytest.fixture
    def logged(self, api_client, user):
        for day in ("2024-01-03", "2024-01-01", "2024-01-02"):
            response = _log_exercise(api_client, user["id"], description=f"Run {day}", duration="20", date=day)
            assert response.status_code == 200
        return user

    def test_full_log(self, api_client, logged):
        response = api_client.get(f"/api/users/{logged['id']}/logs")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == logged["id"]
        assert data["username"] == "ada"
        assert data["count"] == 3
        assert data["log"] == [
            {"description": "Run 2024-01-01", "duration": 20, "date": "Mon Jan 01 2024"},
            {"description": "Run 2024-01-02", "duration": 20, "date": "Tue Jan 02 2024"},
            {"description": "Run 2024-01-03", "duration": 20, "date": "Wed Jan 03 2024"},
        ]

    def test_from_filter(self, api_client, logged):
        response = api_client.get(f"/api/users/{logged['id']}/logs", params={"from": "2024-01-02"})

        data = response.json()
        assert data["count"] == 2
        assert [e["date"] for e in data["log"]] == ["Tue Jan 02 2024", "Wed Jan 03 2024"]

    def test_range_filter(self, api_client, logged):
        response = api_client.get(
            f"/api/users/{logged['id']}/logs",
            params={"from": "2024-01-02", "to": "2024-01-02"},
        )

        data = response.json()
        assert data["count"] == 1
        assert data["log"][0]["date"] == "Tue Jan 02 2024"

    def test_limit_does_not_change_count(self, api_client, logged):
        response = api_client.get(f"/api/users/{logged['id']}/logs", params={"limit": "1"})

        data = response.json()
        assert data["count"] == 3
        assert len(data["log"]) == 1
        assert data["log"][0]["date"] == "Mon Jan 01 2024"

    def test_new_user_has_empty_log(self, api_client, user):
        response = api_client.get(f"/api/users/{user['id']}/logs")

        assert response.status_code == 200
        assert response.json() == {"id": user["id"], "username": "ada", "count": 0, "log": []}

    def test_malformed_id_is_400(self, api_client):
        response = api_client.get("/api/users/xyz/logs")

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid user ID"}

    def test_unknown_user_is_404(self, api_client):
        response = api_client.get(f"/api/users/{uuid.uuid4()}/logs")

        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}

    @pytest.mark.parametrize("params,message", [
        ({"from": "whenever"}, "Invalid from date"),
        ({"to": "2024-02-31"}, "Invalid to date"),
        ({"from": "01/02/2024"}, "Invalid from date"),
        ({"from": "0001-01-01T00:00:00+01:00"}, "Invalid from date"),
        ({"limit": "some"}, "Invalid limit"),
    ])
    def test_bad_query_values_are_400(self, api_client, logged, exercise_repo, params, message):
        exercise_repo.calls.clear()

        response = api_client.get(f"/api/users/{logged['id']}/logs", params=params)

        assert response.status_code == 400
        assert response.json() == {"error": message}
        assert exercise_repo.read_calls == []

    def test_store_failure_is_500(self, api_client, logged, exercise_repo):
        exercise_repo.fail_on.add("find")

        response = api_client.get(f"/api/users/{logged['id']}/logs")

        assert response.status_code == 500
        assert response.json() == {"error": "Server error"}
