"""Unit tests for AuthenticationService (login)."""

from unittest.mock import AsyncMock, Mock

import pytest

from src.application.services.authentication_service import (
    AuthenticationService,
    LoginResult,
)
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Success
from tests.utils.fakes import create_test_user


@pytest.fixture
def user():
    return create_test_user()


@pytest.fixture
def user_repo(user):
    repo = AsyncMock()
    repo.find_by_email.return_value = user
    return repo


@pytest.fixture
def password_service():
    service = Mock()
    service.verify_password.return_value = True
    return service


@pytest.fixture
def token_service():
    service = AsyncMock()
    service.issue.return_value = "session-token"
    return service


@pytest.fixture
def service(user_repo, password_service, token_service):
    return AuthenticationService(
        user_repo=user_repo,
        password_service=password_service,
        token_service=token_service,
        logger=Mock(),
    )


@pytest.mark.unit
class TestLogin:
    """Test AuthenticationService.login."""

    async def test_valid_credentials_issue_token(self, service, user, token_service):
        result = await service.login("user1@mail.com", "P4ssword")

        assert result == Success(
            value=LoginResult(user_id=user.id, username=user.username, token="session-token")
        )
        token_service.issue.assert_awaited_once_with(user.id)

    async def test_unknown_email_fails(self, service, user_repo, token_service):
        user_repo.find_by_email.return_value = None

        result = await service.login("nobody@mail.com", "P4ssword")

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthenticationError)
        assert result.error.code == ErrorCode.AUTHENTICATION_FAILURE
        token_service.issue.assert_not_awaited()

    async def test_wrong_password_fails(self, service, password_service, token_service):
        password_service.verify_password.return_value = False

        result = await service.login("user1@mail.com", "wrong")

        assert isinstance(result, Failure)
        token_service.issue.assert_not_awaited()

    async def test_inactive_user_fails(self, service, user, token_service):
        user.is_active = False

        result = await service.login("user1@mail.com", "P4ssword")

        assert isinstance(result, Failure)
        token_service.issue.assert_not_awaited()
