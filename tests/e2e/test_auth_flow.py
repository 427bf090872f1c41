"""End-to-end tests for authentication flow."""

import pytest
from fastapi.testclient import TestClient

from qna.interface.api.app import create_app
from tests.harness import register_and_login
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by in-memory persistence."""
    return TestClient(create_app(build_test_container()))


class TestAuthFlow:
    """End-to-end tests for email and password authentication."""

    def test_register_login_and_me(self, client):
        """Should register, set the cookie on login and report the user."""
        # Act
        login = register_and_login(client, "alice", "alice@example.com")
        response = client.get("/auth/me")

        # Assert
        assert login["success"] is True
        assert login["username"] == "alice"
        assert "auth_token" in client.cookies
        assert response.status_code == 200
        data = response.json()
        assert data["authenticated"] is True
        assert data["user"]["user_id"] == login["user_id"]
        assert data["user"]["email"] == "alice@example.com"

    def test_register_response_hides_password(self, client):
        # Act
        response = client.post(
            "/auth/register",
            json={"username": "bob", "email": "bob@example.com", "password": "pw"},
        )

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert "password" not in data
        assert "password_hash" not in data

    def test_register_duplicate_email_returns_400(self, client):
        # Arrange
        body = {"username": "bob", "email": "bob@example.com", "password": "pw"}
        client.post("/auth/register", json=body)

        # Act
        response = client.post("/auth/register", json=body)

        # Assert
        assert response.status_code == 400
        assert "already exists" in response.json()["detail"]

    def test_login_wrong_password_returns_401(self, client):
        # Arrange
        register_and_login(client, "alice", "alice@example.com")
        client.cookies.clear()

        # Act
        response = client.post(
            "/auth/login", json={"email": "alice@example.com", "password": "nope"}
        )

        # Assert
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"
        assert "auth_token" not in client.cookies

    def test_me_without_cookie_is_unauthenticated(self, client):
        # Act
        response = client.get("/auth/me")

        # Assert
        assert response.status_code == 200
        assert response.json() == {"authenticated": False, "user": None}

    def test_me_with_garbage_cookie_is_unauthenticated(self, client):
        # Arrange
        client.cookies.set("auth_token", "garbage")

        # Act
        response = client.get("/auth/me")

        # Assert
        assert response.json()["authenticated"] is False

    def test_logout_clears_cookie(self, client):
        """Should clear auth cookie on logout."""
        # Act
        response = client.post("/auth/logout")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["message"] == "Successfully logged out"
        assert "auth_token" in response.headers.get("set-cookie", "")


class TestHealth:
    """Health endpoint."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["environment"] == "test"
