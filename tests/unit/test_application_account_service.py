"""Unit tests for AccountService (account deletion)."""

from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.services.account_service import AccountService
from src.core.enums import ErrorCode
from src.core.errors import ForbiddenError
from src.core.result import Failure, Success


@pytest.fixture
def user_repo():
    repo = AsyncMock()
    repo.delete.return_value = True
    return repo


@pytest.fixture
def token_service():
    return AsyncMock()


@pytest.fixture
def service(user_repo, token_service):
    return AccountService(user_repo=user_repo, token_service=token_service, logger=Mock())


@pytest.mark.unit
class TestDeleteAccount:
    """Test AccountService.delete_account."""

    async def test_owner_deletes_account_and_sessions(
        self, service, user_repo, token_service
    ):
        user_id = uuid7()

        result = await service.delete_account(user_id, str(user_id))

        assert result == Success(value=None)
        token_service.revoke_all_for_user.assert_awaited_once_with(user_id)
        user_repo.delete.assert_awaited_once_with(user_id)

    async def test_other_user_is_forbidden(self, service, user_repo):
        result = await service.delete_account(uuid7(), str(uuid7()))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ForbiddenError)
        assert result.error.code == ErrorCode.UNAUTHORIZED_USER_DELETE
        user_repo.delete.assert_not_awaited()

    async def test_missing_session_is_forbidden(self, service, user_repo):
        result = await service.delete_account(None, str(uuid7()))

        assert isinstance(result, Failure)
        user_repo.delete.assert_not_awaited()

    async def test_malformed_target_id_is_forbidden(self, service):
        result = await service.delete_account(uuid7(), "not-a-uuid")

        assert isinstance(result, Failure)
