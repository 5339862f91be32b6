"""API tests for login and logout.

Tests the HTTP request/response cycle for:
- POST /api/1.0/auth
- POST /api/1.0/logout

Architecture:
- Uses real app with dependency overrides (services mocked)
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from src.application.services import LoginResult
from src.core.container import get_authentication_service, get_token_service
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, ForbiddenError
from src.core.result import Failure, Success
from src.main import app
from src.presentation.i18n import MESSAGES


@pytest.fixture
def auth_service():
    return AsyncMock()


@pytest.fixture
def token_service():
    service = AsyncMock()
    service.validate.return_value = Failure(
        error=ForbiddenError(code=ErrorCode.INVALID_TOKEN, message="invalid")
    )
    return service


@pytest.fixture(autouse=True)
def override_dependencies(auth_service, token_service):
    """Override app dependencies with test doubles."""
    app.dependency_overrides[get_authentication_service] = lambda: auth_service
    app.dependency_overrides[get_token_service] = lambda: token_service
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app, raise_server_exceptions=False)


@pytest.mark.api
class TestLogin:
    """Tests for POST /api/1.0/auth."""

    def test_valid_credentials_return_token(self, client, auth_service):
        user_id = uuid7()
        auth_service.login.return_value = Success(
            value=LoginResult(user_id=user_id, username="user1", token="session-token")
        )

        response = client.post(
            "/api/1.0/auth", json={"email": "user1@mail.com", "password": "P4ssword"}
        )

        assert response.status_code == 200
        assert response.json() == {
            "id": str(user_id),
            "username": "user1",
            "token": "session-token",
        }

    @pytest.mark.parametrize("language", ["en", "br"])
    def test_wrong_credentials_return_401(self, client, auth_service, language):
        auth_service.login.return_value = Failure(
            error=AuthenticationError(
                code=ErrorCode.AUTHENTICATION_FAILURE, message="Incorrect credentials"
            )
        )

        response = client.post(
            "/api/1.0/auth",
            json={"email": "user1@mail.com", "password": "wrong"},
            headers={"Accept-Language": language},
        )

        assert response.status_code == 401
        assert response.json()["message"] == MESSAGES[language]["authentication_failure"]
        assert response.json()["path"] == "/api/1.0/auth"

    @pytest.mark.parametrize(
        "body", [{}, {"email": "user1@mail.com"}, {"password": "P4ssword"}]
    )
    def test_missing_credentials_return_401(self, client, auth_service, body):
        response = client.post("/api/1.0/auth", json=body)

        assert response.status_code == 401
        auth_service.login.assert_not_awaited()


@pytest.mark.api
class TestLogout:
    """Tests for POST /api/1.0/logout."""

    def test_logout_revokes_presented_token(self, client, token_service):
        token_service.validate.return_value = Success(value=uuid7())

        response = client.post(
            "/api/1.0/logout", headers={"Authorization": "Bearer session-token"}
        )

        assert response.status_code == 200
        token_service.validate.assert_awaited_once_with("session-token")
        token_service.revoke.assert_awaited_once_with("session-token")

    def test_logout_without_token_succeeds(self, client, token_service):
        response = client.post("/api/1.0/logout")

        assert response.status_code == 200
        token_service.revoke.assert_not_awaited()

    def test_logout_with_invalid_token_succeeds(self, client, token_service):
        response = client.post(
            "/api/1.0/logout", headers={"Authorization": "Bearer expired"}
        )

        assert response.status_code == 200
        token_service.revoke.assert_not_awaited()
