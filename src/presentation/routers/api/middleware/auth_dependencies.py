"""Bearer token authentication dependencies.

FastAPI dependencies that resolve ``Authorization: Bearer <token>`` to the
owner of a live session token. Every successful lookup slides the token's
expiration forward.

Usage:
    # Handler decides what "no session" means
    @router.delete("/users/{user_id}")
    async def delete_user(
        session: AuthenticatedSession | None = Depends(get_current_session_optional),
    ):
        ...
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Annotated
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import get_token_service
from src.core.result import Success

if TYPE_CHECKING:
    from src.application.services import TokenService

# auto_error=False: a missing header is handled like an invalid token (403)
bearer_scheme_optional = HTTPBearer(auto_error=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticatedSession:
    """Session behind a validated bearer token.

    Attributes:
        token: Raw bearer token (needed to revoke it on logout).
        user_id: Owner of the token.
    """

    token: str
    user_id: UUID


async def get_current_session_optional(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme_optional)
    ],
    token_service: "TokenService" = Depends(get_token_service),
) -> AuthenticatedSession | None:
    """Resolve the bearer token if one is present and still live.

    Returns:
        AuthenticatedSession, or None for missing, malformed, unknown or
        expired tokens (indistinguishable on purpose).
    """
    if credentials is None:
        return None

    result = await token_service.validate(credentials.credentials)
    if isinstance(result, Success):
        return AuthenticatedSession(token=credentials.credentials, user_id=result.value)
    return None
