"""End-to-end tests for the HTTP API through FastAPI's TestClient."""

import pytest
from sqlalchemy.exc import OperationalError

from growth_tracker.crud.activity_log import crud_activity_log
from growth_tracker.data.activities import ACTIVITY_NAMES

from factories import DEFAULT_PASSWORD, auth_headers


def log(client, user, activity="sleep", hours=8, date="2024-03-01", username=None, **extra):
    return client.post(
        "/create-activity",
        json={
            "username": username or user.username,
            "activity": activity,
            "hours": hours,
            "date": date,
            **extra,
        },
        headers=auth_headers(user),
    )


def assert_error(response, status_code, error_code):
    assert response.status_code == status_code, response.text
    body = response.json()
    assert body["success"] is False
    assert body["error_code"] == error_code
    assert body["error"]


# =============================================================================
# Health
# =============================================================================


def test_health_and_root(client):
    assert client.get("/health").json() == {"status": "healthy"}
    response = client.get("/")
    assert response.status_code == 200
    assert "X-Trace-Id" in response.headers


# =============================================================================
# Auth
# =============================================================================


class TestAuth:
    def test_register_then_login_with_username_or_email(self, client):
        response = client.post(
            "/register",
            json={"username": "carol", "email": "Carol@Mail.com", "password": DEFAULT_PASSWORD},
        )
        assert response.status_code == 201
        assert response.json()["success"] is True

        for identifier in ("carol", "carol@mail.com"):
            response = client.post(
                "/login", json={"identifier": identifier, "password": DEFAULT_PASSWORD}
            )
            assert response.status_code == 200
            body = response.json()
            assert body["username"] == "carol"
            assert body["token_type"] == "bearer"
            assert body["access_token"]

    @pytest.mark.parametrize(
        "payload",
        [
            {"username": "alice", "email": "other@mail.com"},
            {"username": "other", "email": "alice@mail.com"},
        ],
    )
    def test_duplicate_registration_conflicts(self, client, user, payload):
        response = client.post("/register", json={**payload, "password": DEFAULT_PASSWORD})
        assert_error(response, 409, "CONFLICT")

    def test_bad_login(self, client, user):
        response = client.post("/login", json={"identifier": "alice", "password": "wrong-pass1"})
        assert_error(response, 400, "INVALID_CREDENTIALS")

        response = client.post(
            "/login", json={"identifier": "nobody", "password": DEFAULT_PASSWORD}
        )
        assert_error(response, 400, "INVALID_CREDENTIALS")

    def test_malformed_registration_is_invalid_request(self, client):
        response = client.post("/register", json={"username": "dave", "password": DEFAULT_PASSWORD})
        assert_error(response, 400, "INVALID_REQUEST")


class TestAuthentication:
    def test_missing_token(self, client, user):
        response = client.post(
            "/get-streak", json={"username": "alice", "date": "2024-03-01"}
        )
        assert_error(response, 401, "UNAUTHORIZED")
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_invalid_token(self, client, user):
        response = client.get("/tile-config", headers={"Authorization": "Bearer garbage"})
        assert_error(response, 401, "UNAUTHORIZED")


# =============================================================================
# Activities
# =============================================================================


class TestCreateActivity:
    def test_returns_row_and_day_total(self, client, user):
        response = log(client, user, hours=8, note="early night")
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["activity"]["name"] == "sleep"
        assert data["activity"]["hours"] == 8
        assert data["activity"]["note"] == "early night"
        assert data["day"] == {"date": "2024-03-01", "total": 8.0, "complete": False}

    def test_day_completes_at_24_hours(self, client, user):
        log(client, user, activity="sleep", hours=12)
        response = log(client, user, activity="office", hours=12)
        assert response.json()["data"]["day"]["complete"] is True

    def test_cannot_log_for_another_user(self, client, user, make_user):
        make_user("bob")
        response = log(client, user, username="bob")
        assert_error(response, 403, "FORBIDDEN")

    @pytest.mark.parametrize(
        "overrides, error_code",
        [
            ({"activity": "napping"}, "INVALID_ACTIVITY"),
            ({"hours": 1.1}, "INVALID_HOURS"),
            ({"hours": 24.25}, "INVALID_HOURS"),
            ({"hours": -1}, "INVALID_HOURS"),
            ({"date": "2024-02-30"}, "INVALID_DATE"),
            ({"date": "03/01/2024"}, "INVALID_DATE"),
            ({"note": "x" * 501}, "INVALID_NOTE"),
        ],
    )
    def test_validation_error_codes(self, client, user, overrides, error_code):
        response = log(client, user, **overrides)
        assert_error(response, 400, error_code)

    @pytest.mark.parametrize(
        "overrides, error_code",
        [
            ({"hours": "abc"}, "INVALID_HOURS"),
            ({"hours": None}, "INVALID_HOURS"),
            ({"hours": [8]}, "INVALID_HOURS"),
            ({"date": 20240301}, "INVALID_DATE"),
            ({"date": None}, "INVALID_DATE"),
        ],
    )
    def test_wrongly_typed_values_keep_their_error_code(self, client, user, overrides, error_code):
        response = log(client, user, **overrides)
        assert_error(response, 400, error_code)

    def test_hours_checked_on_the_literal_sent(self, client, user):
        headers = {**auth_headers(user), "Content-Type": "application/json"}
        body = '{"username": "alice", "activity": "sleep", "date": "2024-03-01", "hours": %s}'

        response = client.post("/create-activity", content=body % "0.250000000000000001", headers=headers)
        assert_error(response, 400, "INVALID_HOURS")

        response = client.post("/create-activity", content=body % "7.75", headers=headers)
        assert response.status_code == 200
        assert response.json()["data"]["activity"]["hours"] == 7.75

    def test_missing_field_is_invalid_request(self, client, user):
        response = client.post(
            "/create-activity",
            json={"username": "alice", "activity": "sleep", "date": "2024-03-01"},
            headers=auth_headers(user),
        )
        assert_error(response, 400, "INVALID_REQUEST")
        assert "hours" in response.json()["error"]


class TestReadActivities:
    def test_get_activities_in_range(self, client, user):
        log(client, user, date="2024-03-01")
        log(client, user, date="2024-03-02", activity="study", hours=3)
        log(client, user, date="2024-03-05")

        response = client.post(
            "/get-activities",
            json={"username": "alice", "start_date": "2024-03-01", "end_date": "2024-03-02"},
            headers=auth_headers(user),
        )
        assert response.status_code == 200
        rows = response.json()["data"]
        assert [(r["date"], r["name"], r["hours"]) for r in rows] == [
            ("2024-03-01", "sleep", 8.0),
            ("2024-03-02", "study", 3.0),
        ]

    def test_non_string_range_bound(self, client, user):
        response = client.post(
            "/get-activities",
            json={"username": "alice", "start_date": None, "end_date": "2024-03-01"},
            headers=auth_headers(user),
        )
        assert_error(response, 400, "INVALID_DATE")
        assert "start_date" in response.json()["error"]

    def test_database_failure_uses_error_envelope(self, client, user, monkeypatch):
        def fail(*args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("database is unavailable"))

        monkeypatch.setattr(crud_activity_log, "total_quarter_hours", fail)
        response = client.post(
            "/get-day-summary",
            json={"username": "alice", "date": "2024-03-01"},
            headers=auth_headers(user),
        )
        assert_error(response, 500, "INTERNAL_ERROR")
        assert "unavailable" not in response.json()["error"]

    def test_inverted_range(self, client, user):
        response = client.post(
            "/get-activities",
            json={"username": "alice", "start_date": "2024-03-05", "end_date": "2024-03-01"},
            headers=auth_headers(user),
        )
        assert_error(response, 400, "INVALID_DATE")

    def test_day_summary(self, client, user):
        log(client, user, hours=10.5)
        response = client.post(
            "/get-day-summary",
            json={"username": "alice", "date": "2024-03-01"},
            headers=auth_headers(user),
        )
        assert response.json()["data"] == {"date": "2024-03-01", "total": 10.5, "complete": False}

    def test_unknown_user(self, client, user):
        response = client.post(
            "/get-day-summary",
            json={"username": "ghost", "date": "2024-03-01"},
            headers=auth_headers(user),
        )
        assert_error(response, 404, "NOT_FOUND")


# =============================================================================
# Privacy
# =============================================================================


class TestPrivacy:
    def test_private_account_hidden_from_others(self, client, user, make_user):
        bob = make_user("bob", is_private=True)
        log(client, bob, username="bob")

        for path, payload in [
            ("/get-activities", {"start_date": "2024-03-01", "end_date": "2024-03-01"}),
            ("/get-day-summary", {"date": "2024-03-01"}),
            ("/get-streak", {"date": "2024-03-01"}),
            ("/tile-config/user", {}),
        ]:
            response = client.post(
                path, json={"username": "bob", **payload}, headers=auth_headers(user)
            )
            assert_error(response, 200, "ACCOUNT_PRIVATE")

    def test_owner_can_read_private_data(self, client, make_user):
        bob = make_user("bob", is_private=True)
        log(client, bob, username="bob")
        response = client.post(
            "/get-activities",
            json={"username": "bob", "start_date": "2024-03-01", "end_date": "2024-03-01"},
            headers=auth_headers(bob),
        )
        assert response.status_code == 200
        assert len(response.json()["data"]) == 1

    def test_public_account_visible_to_others(self, client, user, make_user):
        bob = make_user("bob")
        log(client, bob, username="bob")
        response = client.post(
            "/get-activities",
            json={"username": "bob", "start_date": "2024-03-01", "end_date": "2024-03-01"},
            headers=auth_headers(user),
        )
        assert response.json()["success"] is True
        assert len(response.json()["data"]) == 1

    def test_toggle_privacy(self, client, user):
        headers = auth_headers(user)
        assert client.get("/get-privacy", headers=headers).json()["is_private"] is False

        response = client.post("/update-privacy", json={"is_private": True}, headers=headers)
        assert response.json() == {"success": True, "is_private": True}
        assert client.get("/get-privacy", headers=headers).json()["is_private"] is True


# =============================================================================
# Streaks
# =============================================================================


class TestStreakRoute:
    def test_streak_after_complete_days(self, client, user):
        for date in ("2024-03-01", "2024-03-02"):
            log(client, user, activity="sleep", hours=12, date=date)
            log(client, user, activity="office", hours=12, date=date)
        log(client, user, activity="sleep", hours=6, date="2024-03-03")

        response = client.post(
            "/get-streak",
            json={"username": "alice", "date": "2024-03-03"},
            headers=auth_headers(user),
        )
        assert response.status_code == 200
        assert response.json()["data"] == {"current": 2, "longest": 2, "date": "2024-03-03"}

    def test_date_defaults_to_today(self, client, user):
        response = client.post(
            "/get-streak", json={"username": "alice"}, headers=auth_headers(user)
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["current"] == 0
        assert data["longest"] == 0

    def test_bad_date(self, client, user):
        response = client.post(
            "/get-streak",
            json={"username": "alice", "date": "yesterday"},
            headers=auth_headers(user),
        )
        assert_error(response, 400, "INVALID_DATE")

    def test_numeric_date(self, client, user):
        response = client.post(
            "/get-streak", json={"username": "alice", "date": 5}, headers=auth_headers(user)
        )
        assert_error(response, 400, "INVALID_DATE")


# =============================================================================
# Tile config
# =============================================================================


class TestTileConfigRoutes:
    def test_default_then_save(self, client, user):
        headers = auth_headers(user)
        default = client.get("/tile-config", headers=headers).json()["data"]
        assert default["order"] == ACTIVITY_NAMES
        assert default["sizes"]["sleep"] == "medium"

        order = list(reversed(ACTIVITY_NAMES))
        response = client.post(
            "/tile-config",
            json={"config": {"order": order, "sizes": {"sleep": "wide"}}},
            headers=headers,
        )
        assert response.status_code == 200
        saved = client.get("/tile-config", headers=headers).json()["data"]
        assert saved["order"] == order
        assert saved["sizes"]["sleep"] == "wide"

    def test_invalid_config(self, client, user):
        response = client.post(
            "/tile-config",
            json={"config": {"order": ACTIVITY_NAMES[:3], "sizes": {}}},
            headers=auth_headers(user),
        )
        assert_error(response, 400, "INVALID_CONFIG")

    def test_read_other_users_layout(self, client, user, make_user):
        bob = make_user("bob")
        order = list(reversed(ACTIVITY_NAMES))
        client.post(
            "/tile-config",
            json={"config": {"order": order, "sizes": {}}},
            headers=auth_headers(bob),
        )
        response = client.post(
            "/tile-config/user", json={"username": "bob"}, headers=auth_headers(user)
        )
        assert response.json()["data"]["order"] == order


# =============================================================================
# Account
# =============================================================================


class TestAccount:
    def test_profile(self, client, user):
        response = client.get("/profile", headers=auth_headers(user))
        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "id": user.id,
            "username": "alice",
            "email": "alice@mail.com",
            "is_private": False,
        }

    def test_profile_requires_token(self, client, user):
        assert_error(client.get("/profile"), 401, "UNAUTHORIZED")

    def test_update_username_returns_new_token(self, client, user):
        response = client.post(
            "/update-username", json={"new_username": "alice2"}, headers=auth_headers(user)
        )
        assert response.status_code == 200
        body = response.json()
        assert body["new_username"] == "alice2"

        new_headers = {"Authorization": f"Bearer {body['access_token']}"}
        response = client.post(
            "/get-streak", json={"username": "alice2", "date": "2024-03-01"}, headers=new_headers
        )
        assert response.status_code == 200

    def test_update_username_conflict(self, client, user, make_user):
        make_user("bob")
        response = client.post(
            "/update-username", json={"new_username": "bob"}, headers=auth_headers(user)
        )
        assert_error(response, 409, "CONFLICT")

    def test_change_password(self, client, user):
        headers = auth_headers(user)
        response = client.post(
            "/change-password",
            json={"current_password": "wrong-pass1", "new_password": "NewPass456"},
            headers=headers,
        )
        assert_error(response, 400, "INVALID_CREDENTIALS")

        response = client.post(
            "/change-password",
            json={"current_password": DEFAULT_PASSWORD, "new_password": "NewPass456"},
            headers=headers,
        )
        assert response.status_code == 200

        response = client.post("/login", json={"identifier": "alice", "password": "NewPass456"})
        assert response.status_code == 200

    def test_weak_new_password_rejected(self, client, user):
        response = client.post(
            "/change-password",
            json={"current_password": DEFAULT_PASSWORD, "new_password": "onlyletters"},
            headers=auth_headers(user),
        )
        assert_error(response, 400, "INVALID_REQUEST")
