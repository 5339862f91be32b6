"""Password reset service.

Flow (request_reset):
1. Look up user by email -> NotFound if none
2. Generate a new reset token and store it on the user (overwrites any
   previous, unconsumed token) -> NotFound if the user vanished meanwhile
3. Send the reset email -> DeliveryError if the transport fails; the stored
   token is kept so the user can simply request again

Flow (validate_and_consume):
1. Find the user holding exactly this token -> Forbidden if none
2. Check the password policy -> ValidationError, token stays usable
3. Hash the password and, in one UPDATE, store the hash and clear the token
   -> Forbidden if a concurrent request consumed it first

Architecture:
- Application layer ONLY imports from core and domain
- NO infrastructure imports (repositories are injected via protocols)
"""

from src.core.enums import ErrorCode
from src.core.errors import (
    DeliveryError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from src.core.result import Failure, Result, Success
from src.domain.enums import EmailTemplate
from src.domain.protocols import (
    EmailServiceProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
    TokenGenerationProtocol,
    UserRepository,
)
from src.domain.value_objects import Password


class PasswordResetService:
    """Issues single-use reset tokens and consumes them on password change.

    Security considerations:
    - Token check happens before any password policy evaluation, so an
      invalid token never reveals anything about the password rules
    - "Unknown" and "already consumed" tokens are both Forbidden
    - Tokens are never logged
    """

    def __init__(
        self,
        user_repo: UserRepository,
        token_generator: TokenGenerationProtocol,
        password_service: PasswordHashingProtocol,
        email_service: EmailServiceProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize password reset service with dependencies.

        Args:
            user_repo: User lookup and reset-token updates.
            token_generator: Source of opaque reset tokens.
            password_service: Hashing for the new password.
            email_service: Delivery of the reset email.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._token_generator = token_generator
        self._password_service = password_service
        self._email_service = email_service
        self._logger = logger

    async def request_reset(
        self, email: str
    ) -> Result[None, NotFoundError | DeliveryError]:
        """Start a password reset for ``email``.

        Returns:
            Success(None) once the reset email was handed off,
            Failure(NotFoundError) when no user has this email,
            Failure(DeliveryError) when the email could not be sent.
        """
        user = await self._user_repo.find_by_email(email)
        if user is None:
            return Failure(error=self._email_not_in_use(email))

        reset_token = self._token_generator.generate_token()
        if not await self._user_repo.set_reset_token(user.id, reset_token):
            # Deleted between lookup and update.
            return Failure(error=self._email_not_in_use(email))

        send_result = await self._email_service.send(
            user.email, EmailTemplate.PASSWORD_RESET, {"token": reset_token}
        )
        if isinstance(send_result, Failure):
            # Stored token stays valid; a retry overwrites it.
            self._logger.warning(
                "password_reset_email_failed",
                user_id=str(user.id),
                service=send_result.error.service_name,
            )
            return send_result

        self._logger.info("password_reset_requested", user_id=str(user.id))
        return Success(value=None)

    async def validate_and_consume(
        self, reset_token: object, new_password: object
    ) -> Result[None, ForbiddenError | ValidationError]:
        """Set a new password using a pending reset token.

        Args:
            reset_token: Token from the reset email (raw request value).
            new_password: Desired password (raw request value, may be missing
                or not a string).

        Returns:
            Success(None) when the password was replaced,
            Failure(ForbiddenError) for unknown or consumed tokens,
            Failure(ValidationError) when the password breaks the policy.
        """
        if not isinstance(reset_token, str) or not reset_token:
            return Failure(error=self._unauthorized())

        user = await self._user_repo.find_by_reset_token(reset_token)
        if user is None:
            return Failure(error=self._unauthorized())

        match Password.create(new_password):
            case Failure(error=policy_error):
                return Failure(error=policy_error)
            case Success(value=password):
                password_hash = self._password_service.hash_password(password.value)

        if not await self._user_repo.consume_reset_token(reset_token, password_hash):
            return Failure(error=self._unauthorized())

        self._logger.info("password_reset_completed", user_id=str(user.id))
        return Success(value=None)

    @staticmethod
    def _email_not_in_use(email: str) -> NotFoundError:
        return NotFoundError(
            code=ErrorCode.EMAIL_NOT_IN_USE,
            message="E-mail not in use",
            resource_type="User",
            resource_id=email,
        )

    @staticmethod
    def _unauthorized() -> ForbiddenError:
        return ForbiddenError(
            code=ErrorCode.UNAUTHORIZED_PASSWORD_RESET,
            message="You are not authorized to update your password",
        )
