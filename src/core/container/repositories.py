"""Repository dependency factories.

Request-scoped repository instances sharing the request's session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        TokenRepository,
        UserRepository,
    )


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "UserRepository":
    """Get user repository (request-scoped)."""
    from src.infrastructure.persistence.repositories import UserRepository

    return UserRepository(session=session)


async def get_token_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "TokenRepository":
    """Get session token repository (request-scoped)."""
    from src.infrastructure.persistence.repositories import TokenRepository

    return TokenRepository(session=session)
