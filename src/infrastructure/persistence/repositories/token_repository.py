"""TokenRepository - SQLAlchemy implementation of TokenRepository protocol.

Every public method is exactly one SQL statement followed by a commit, so
request handlers and the cleanup job never observe a half-applied change.
"""

from datetime import datetime
from typing import Any, cast
from uuid import UUID

from sqlalchemy import case, delete, literal, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.protocols.token_repository import TokenData
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.auth_token import (
    AuthToken as AuthTokenModel,
)


class TokenRepository:
    """SQLAlchemy implementation of TokenRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = TokenRepository(session)
        ...     owner = await repo.touch(value, now=now, cutoff=now - timedelta(days=7))
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, token: TokenData) -> None:
        model = AuthTokenModel(
            token=token.value,
            user_id=token.user_id,
            last_used_at=token.last_used_at,
        )
        self.session.add(model)
        await self.session.commit()

    async def find_by_value(self, value: str) -> TokenData | None:
        stmt = select(AuthTokenModel).where(AuthTokenModel.token == value)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_data(model)

    async def touch(self, value: str, now: datetime, cutoff: datetime) -> UUID | None:
        """Advance last_used_at of a live token and return its owner.

        Single conditional UPDATE ... RETURNING: the liveness check and the
        write cannot be separated by a concurrent delete. The CASE keeps
        last_used_at monotonic when two validations race with slightly
        different clocks.

        Args:
            value: Opaque token value.
            now: Current time.
            cutoff: Oldest last_used_at still considered live.

        Returns:
            Owner user_id, or None if the token is absent or stale.
        """
        now_param = literal(now, AuthTokenModel.last_used_at.type)
        stmt = (
            update(AuthTokenModel)
            .where(
                AuthTokenModel.token == value,
                AuthTokenModel.last_used_at >= cutoff,
            )
            .values(
                last_used_at=case(
                    (AuthTokenModel.last_used_at < now_param, now_param),
                    else_=AuthTokenModel.last_used_at,
                )
            )
            .returning(AuthTokenModel.user_id)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        owner_id = result.scalar_one_or_none()
        await self.session.commit()
        return owner_id

    async def delete_if_stale(self, value: str, cutoff: datetime) -> bool:
        stmt = delete(AuthTokenModel).where(
            AuthTokenModel.token == value,
            AuthTokenModel.last_used_at < cutoff,
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return (cast(Any, result).rowcount or 0) > 0

    async def delete_by_value(self, value: str) -> bool:
        """Delete a token (logout).

        Returns:
            True if deleted, False if not found.
        """
        stmt = delete(AuthTokenModel).where(AuthTokenModel.token == value)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return (cast(Any, result).rowcount or 0) > 0

    async def delete_older_than(self, cutoff: datetime) -> int:
        """Bulk-delete stale tokens in a single statement.

        Args:
            cutoff: Tokens with last_used_at strictly before this are removed.

        Returns:
            Number of tokens deleted.
        """
        stmt = delete(AuthTokenModel).where(AuthTokenModel.last_used_at < cutoff)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return cast(Any, result).rowcount or 0

    async def delete_all_for_user(self, user_id: UUID) -> int:
        """Delete all session tokens of a user (account deletion).

        Returns:
            Number of tokens deleted.
        """
        stmt = delete(AuthTokenModel).where(AuthTokenModel.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return cast(Any, result).rowcount or 0

    def _to_data(self, model: AuthTokenModel) -> TokenData:
        return TokenData(
            value=model.token,
            user_id=model.user_id,
            last_used_at=ensure_utc(model.last_used_at),
        )
