"""Session token service.

Flow (validate):
1. Reject empty values
2. Atomically touch the token if it is still live -> owner
3. Otherwise delete it if it is stale (no-op when it never existed)
4. Return Forbidden; callers cannot tell "expired" from "unknown"

Architecture:
- Application layer ONLY imports from core and domain
- Storage, randomness and time are injected through protocols
"""

from datetime import timedelta
from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import ForbiddenError
from src.core.result import Failure, Result, Success
from src.domain.protocols import (
    ClockProtocol,
    LoggerProtocol,
    TokenData,
    TokenGenerationProtocol,
    TokenRepository,
)


class TokenService:
    """Issues, validates (sliding expiration) and revokes session tokens.

    Example:
        >>> value = await token_service.issue(user.id)
        >>> match await token_service.validate(value):
        ...     case Success(value=user_id): ...
        ...     case Failure(error=error): ...
    """

    def __init__(
        self,
        token_repo: TokenRepository,
        token_generator: TokenGenerationProtocol,
        clock: ClockProtocol,
        logger: LoggerProtocol,
        inactivity_threshold: timedelta = timedelta(days=7),
    ) -> None:
        """Initialize token service with dependencies.

        Args:
            token_repo: Session token persistence.
            token_generator: Source of opaque random values.
            clock: Source of "now".
            logger: Structured logger.
            inactivity_threshold: Idle time after which a token is dead.
        """
        self._token_repo = token_repo
        self._token_generator = token_generator
        self._clock = clock
        self._logger = logger
        self._inactivity_threshold = inactivity_threshold

    async def issue(self, user_id: UUID) -> str:
        """Create a session token for an authenticated user.

        Returns:
            Opaque token value to hand to the client as bearer credential.
        """
        value = self._token_generator.generate_token()
        await self._token_repo.save(
            TokenData(value=value, user_id=user_id, last_used_at=self._clock.now())
        )
        self._logger.debug("session_token_issued", user_id=str(user_id))
        return value

    async def validate(self, value: str | None) -> Result[UUID, ForbiddenError]:
        """Resolve a bearer token to its owner and extend its lifetime.

        Args:
            value: Token presented by the client.

        Returns:
            Success(user_id) for a live token, Failure(ForbiddenError) for
            missing, unknown or expired tokens.
        """
        if not value:
            return Failure(error=self._invalid_token())

        now = self._clock.now()
        cutoff = now - self._inactivity_threshold

        owner_id = await self._token_repo.touch(value, now=now, cutoff=cutoff)
        if owner_id is not None:
            return Success(value=owner_id)

        if await self._token_repo.delete_if_stale(value, cutoff=cutoff):
            self._logger.debug("session_token_expired", cutoff=cutoff.isoformat())
        return Failure(error=self._invalid_token())

    async def revoke(self, value: str | None) -> None:
        """Delete a token (logout). Unknown or empty values are a no-op."""
        if not value:
            return
        if await self._token_repo.delete_by_value(value):
            self._logger.debug("session_token_revoked")

    async def revoke_all_for_user(self, user_id: UUID) -> int:
        """Delete every session of a user.

        Returns:
            Number of revoked tokens.
        """
        count = await self._token_repo.delete_all_for_user(user_id)
        self._logger.debug("session_tokens_revoked", user_id=str(user_id), count=count)
        return count

    @staticmethod
    def _invalid_token() -> ForbiddenError:
        return ForbiddenError(
            code=ErrorCode.INVALID_TOKEN,
            message="Session token is invalid or expired",
        )
