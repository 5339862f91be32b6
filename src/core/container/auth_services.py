"""Authentication service dependency factories.

Request-scoped application services for:
- Session tokens (login, protected requests, logout)
- Password reset (request and completion)
- Account deletion

All services of one request share the request's database session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.config import settings
from src.core.container.infrastructure import (
    get_clock,
    get_email_service,
    get_logger,
    get_password_service,
    get_token_generator,
)
from src.core.container.repositories import (
    get_token_repository,
    get_user_repository,
)

if TYPE_CHECKING:
    from src.application.services import (
        AccountService,
        AuthenticationService,
        PasswordResetService,
        TokenService,
    )
    from src.domain.protocols import (
        EmailServiceProtocol,
        TokenRepository,
        UserRepository,
    )


async def get_token_service(
    token_repo: "TokenRepository" = Depends(get_token_repository),
) -> "TokenService":
    """Get session token service (request-scoped)."""
    from src.application.services import TokenService

    return TokenService(
        token_repo=token_repo,
        token_generator=get_token_generator(),
        clock=get_clock(),
        logger=get_logger(),
        inactivity_threshold=settings.session_inactivity,
    )


async def get_password_reset_service(
    user_repo: "UserRepository" = Depends(get_user_repository),
    email_service: "EmailServiceProtocol" = Depends(get_email_service),
) -> "PasswordResetService":
    """Get password reset service (request-scoped).

    ``get_email_service`` is resolved through Depends so tests can swap the
    adapter with ``app.dependency_overrides``.
    """
    from src.application.services import PasswordResetService

    return PasswordResetService(
        user_repo=user_repo,
        token_generator=get_token_generator(),
        password_service=get_password_service(),
        email_service=email_service,
        logger=get_logger(),
    )


async def get_authentication_service(
    user_repo: "UserRepository" = Depends(get_user_repository),
    token_service: "TokenService" = Depends(get_token_service),
) -> "AuthenticationService":
    """Get login service (request-scoped)."""
    from src.application.services import AuthenticationService

    return AuthenticationService(
        user_repo=user_repo,
        password_service=get_password_service(),
        token_service=token_service,
        logger=get_logger(),
    )


async def get_account_service(
    user_repo: "UserRepository" = Depends(get_user_repository),
    token_service: "TokenService" = Depends(get_token_service),
) -> "AccountService":
    """Get account service (request-scoped)."""
    from src.application.services import AccountService

    return AccountService(
        user_repo=user_repo,
        token_service=token_service,
        logger=get_logger(),
    )
