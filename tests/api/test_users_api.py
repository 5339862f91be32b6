"""API tests for DELETE /api/1.0/users/{user_id}.

Architecture:
- Uses real app with dependency overrides
- TokenService is mocked (bearer validation); AccountService is real,
  with mocked repository, so ownership rules are exercised end to end
"""

from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from src.application.services import AccountService
from src.core.container import get_account_service, get_token_service
from src.core.enums import ErrorCode
from src.core.errors import ForbiddenError
from src.core.result import Failure, Success
from src.main import app
from src.presentation.i18n import MESSAGES


@pytest.fixture
def user_id():
    return uuid7()


@pytest.fixture
def token_service(user_id):
    service = AsyncMock()
    service.validate.side_effect = lambda value: (
        Success(value=user_id)
        if value == "owner-token"
        else Failure(error=ForbiddenError(code=ErrorCode.INVALID_TOKEN, message="x"))
    )
    return service


@pytest.fixture
def user_repo():
    return AsyncMock()


@pytest.fixture(autouse=True)
def override_dependencies(token_service, user_repo):
    account_service = AccountService(
        user_repo=user_repo, token_service=token_service, logger=Mock()
    )
    app.dependency_overrides[get_token_service] = lambda: token_service
    app.dependency_overrides[get_account_service] = lambda: account_service
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app, raise_server_exceptions=False)


@pytest.mark.api
class TestDeleteUser:
    """Tests for DELETE /api/1.0/users/{user_id}."""

    def test_owner_can_delete(self, client, user_id, user_repo, token_service):
        response = client.delete(
            f"/api/1.0/users/{user_id}",
            headers={"Authorization": "Bearer owner-token"},
        )

        assert response.status_code == 200
        user_repo.delete.assert_awaited_once_with(user_id)
        token_service.revoke_all_for_user.assert_awaited_once_with(user_id)

    def test_without_token_returns_403(self, client, user_id, user_repo):
        response = client.delete(f"/api/1.0/users/{user_id}")

        assert response.status_code == 403
        user_repo.delete.assert_not_awaited()

    @pytest.mark.parametrize("language", ["en", "br"])
    def test_expired_token_returns_localized_403(
        self, client, user_id, user_repo, language
    ):
        response = client.delete(
            f"/api/1.0/users/{user_id}",
            headers={"Authorization": "Bearer expired-token", "Accept-Language": language},
        )

        assert response.status_code == 403
        body = response.json()
        assert body["message"] == MESSAGES[language]["unauthorized_user_delete"]
        assert body["path"] == f"/api/1.0/users/{user_id}"
        user_repo.delete.assert_not_awaited()

    def test_other_users_account_returns_403(self, client, user_repo):
        response = client.delete(
            f"/api/1.0/users/{uuid7()}",
            headers={"Authorization": "Bearer owner-token"},
        )

        assert response.status_code == 403
        user_repo.delete.assert_not_awaited()

    def test_non_bearer_scheme_is_ignored(self, client, user_id, token_service):
        response = client.delete(
            f"/api/1.0/users/{user_id}",
            headers={"Authorization": "Basic b3duZXItdG9rZW4="},
        )

        assert response.status_code == 403
        token_service.validate.assert_not_awaited()
