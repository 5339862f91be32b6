"""Account deletion service.

Only the owner of a live session may delete an account; the user's
session tokens go with it.
"""

from uuid import UUID

from src.application.services.token_service import TokenService
from src.core.enums import ErrorCode
from src.core.errors import ForbiddenError
from src.core.result import Failure, Result, Success
from src.domain.protocols import LoggerProtocol, UserRepository


class AccountService:
    """Self-service account operations."""

    def __init__(
        self,
        user_repo: UserRepository,
        token_service: TokenService,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._token_service = token_service
        self._logger = logger

    async def delete_account(
        self, requesting_user_id: UUID | None, target_user_id: str
    ) -> Result[None, ForbiddenError]:
        """Delete ``target_user_id`` on behalf of its own session.

        Args:
            requesting_user_id: Owner of the presented session token, or None
                when the request carried no valid token.
            target_user_id: Raw user id from the request path.

        Returns:
            Success(None) or Failure(ForbiddenError) when the caller is not
            the owner.
        """
        if requesting_user_id is None or str(requesting_user_id) != target_user_id:
            return Failure(
                error=ForbiddenError(
                    code=ErrorCode.UNAUTHORIZED_USER_DELETE,
                    message="You are not authorized to delete user",
                )
            )

        await self._token_service.revoke_all_for_user(requesting_user_id)
        await self._user_repo.delete(requesting_user_id)
        self._logger.info("account_deleted", user_id=str(requesting_user_id))
        return Success(value=None)
