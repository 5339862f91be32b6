"""Login service: verifies credentials and opens a session.

Unknown email, wrong password and inactive accounts all produce the same
AuthenticationError.
"""

from dataclasses import dataclass
from uuid import UUID

from src.application.services.token_service import TokenService
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class LoginResult:
    """Outcome of a successful login."""

    user_id: UUID
    username: str
    token: str


class AuthenticationService:
    """Authenticates users by email and password."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_service: TokenService,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_service = token_service
        self._logger = logger

    async def login(
        self, email: str, password: str
    ) -> Result[LoginResult, AuthenticationError]:
        """Verify credentials and issue a session token.

        Returns:
            Success(LoginResult) or Failure(AuthenticationError).
        """
        user = await self._user_repo.find_by_email(email)
        if (
            user is None
            or not user.can_login()
            or not self._password_service.verify_password(password, user.password_hash)
        ):
            self._logger.info("login_failed", email=email)
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.AUTHENTICATION_FAILURE,
                    message="Incorrect credentials",
                )
            )

        token = await self._token_service.issue(user.id)
        self._logger.info("login_succeeded", user_id=str(user.id))
        return Success(
            value=LoginResult(user_id=user.id, username=user.username, token=token)
        )
