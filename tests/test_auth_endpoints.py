"""Tests for auth endpoints and the session guard."""

from fastapi.testclient import TestClient

from artyatra.api.app import create_app
from tests.conftest import json_response

SIGNUP = {
    "phone": "98765 43210",
    "name": "Asha",
    "email": "asha@example.com",
    "gender": "Female",
    "date_of_birth": "1995-04-12",
    "place": "Warangal",
    "password": "s3cret",
    "consent": True,
}


def test_login_returns_token_and_limits(container, auth_client) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/auth/login", json={"phone": "9876543210", "password": "pw"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["token"] == "Bearer abc123"
    assert data["userId"] == "user-42"
    assert data["idleTimeoutMinutes"] == 30
    assert data["maxSessionMinutes"] == 480
    assert auth_client.logins == [("9876543210", "pw")]


def test_login_rejection_forwards_status(container, auth_client) -> None:
    auth_client.login_response = json_response(401, {"message": "Bad password"})
    client = TestClient(create_app(container))

    response = client.post(
        "/api/auth/login", json={"phone": "9876543210", "password": "pw"}
    )

    assert response.status_code == 401
    assert response.json() == {"error": "Bad password"}


def test_login_requires_credentials(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/auth/login", json={"phone": "9876543210"})

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request"


def test_expired_session_reports_reason(container, clock, auth_headers) -> None:
    client = TestClient(create_app(container))
    clock.advance(minutes=45)

    response = client.get("/api/categories", headers=auth_headers)

    assert response.status_code == 401
    assert response.json() == {
        "error": "Session expired",
        "reason": "Your session expired due to inactivity. Please sign in again.",
    }


def test_logout_then_session_status(container, auth_headers) -> None:
    client = TestClient(create_app(container))

    assert client.get("/api/auth/session", headers=auth_headers).json() == {
        "authenticated": True,
        "reason": None,
    }
    client.post("/api/auth/logout", headers=auth_headers)

    status = client.get("/api/auth/session", headers=auth_headers).json()
    assert status == {"authenticated": False, "reason": "You have been signed out."}
    assert client.get("/api/categories", headers=auth_headers).status_code == 401


def test_me_forwards_profile(container, auth_client, auth_headers) -> None:
    client = TestClient(create_app(container))

    response = client.get("/api/auth/me", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["id"] == "user-42"
    assert auth_client.profile_tokens == ["Bearer test-token"]


def test_signup_normalizes_phone(container, auth_client) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/auth/signup", json=SIGNUP)

    assert response.status_code == 201
    payload = auth_client.signups[0]
    assert payload["phone"] == "+919876543210"
    assert payload["role_ids"] == [2]
    assert payload["has_given_consent"] is True
    assert payload["date_of_birth"] == "1995-04-12"


def test_signup_requires_consent(container, auth_client) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/auth/signup", json={**SIGNUP, "consent": False})

    assert response.status_code == 400
    assert "consent" in response.json()["message"]
    assert auth_client.signups == []


def test_session_polling_does_not_keep_session_alive(
    container, clock, auth_headers
) -> None:
    client = TestClient(create_app(container))

    clock.advance(minutes=25)
    first = client.get("/api/auth/session", headers=auth_headers).json()
    clock.advance(minutes=25)
    second = client.get("/api/auth/session", headers=auth_headers).json()
    third = client.get("/api/auth/session", headers=auth_headers).json()

    assert first == {"authenticated": True, "reason": None}
    assert second == {
        "authenticated": False,
        "reason": "Your session expired due to inactivity. Please sign in again.",
    }
    assert third == {"authenticated": False, "reason": None}
    response = client.get("/api/categories", headers=auth_headers)
    assert response.json() == {"error": "Not authenticated"}


def test_login_network_failure_returns_500(container, auth_client) -> None:
    auth_client.login_error = ConnectionError("connection refused")
    client = TestClient(create_app(container))

    response = client.post(
        "/api/auth/login", json={"phone": "9876543210", "password": "pw"}
    )

    assert response.status_code == 500
    assert response.json() == {
        "error": "Login failed",
        "message": "connection refused",
    }
