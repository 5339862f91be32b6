"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel.

Reset-token writes are single-statement UPDATEs, so concurrent requests for
the same user are serialized by the database's row lock and the later
write wins.
"""

from typing import Any, cast
from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.user import User
from src.infrastructure.persistence.base import ensure_utc
from src.infrastructure.persistence.models.user import User as UserModel


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This class does NOT inherit from UserRepository protocol (Protocol uses
    structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = UserRepository(session)
        ...     user = await repo.find_by_email("user1@mail.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address.

        Comparison is case-insensitive. Plain equality on lower() is used
        rather than ILIKE so ``_`` and ``%`` in addresses are not wildcards.

        Args:
            email: User's email address.

        Returns:
            Domain User entity if found, None otherwise.
        """
        stmt = select(UserModel).where(func.lower(UserModel.email) == email.lower())
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def find_by_reset_token(self, reset_token: str) -> User | None:
        stmt = select(UserModel).where(UserModel.password_reset_token == reset_token)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()

        if user_model is None:
            return None

        return self._to_domain(user_model)

    async def save(self, user: User) -> None:
        """Create new user in database.

        Raises:
            IntegrityError: If email already exists.
        """
        user_model = self._to_model(user)
        self.session.add(user_model)
        await self.session.commit()

    async def set_reset_token(self, user_id: UUID, reset_token: str) -> bool:
        """Overwrite the pending reset token of one user.

        Returns:
            True if the user exists and was updated.
        """
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(password_reset_token=reset_token)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return (cast(Any, result).rowcount or 0) > 0

    async def consume_reset_token(self, reset_token: str, password_hash: str) -> bool:
        """Replace the password hash and clear the reset token together.

        The WHERE clause re-checks the token, so of two concurrent consumers
        only the first one updates a row.

        Returns:
            True if this call consumed the token.
        """
        stmt = (
            update(UserModel)
            .where(UserModel.password_reset_token == reset_token)
            .values(password_hash=password_hash, password_reset_token=None)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return (cast(Any, result).rowcount or 0) > 0

    async def delete(self, user_id: UUID) -> bool:
        """Delete user (hard delete).

        Returns:
            True if deleted, False if not found.
        """
        stmt = delete(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return (cast(Any, result).rowcount or 0) > 0

    def _to_domain(self, user_model: UserModel) -> User:
        """Convert database model to domain entity."""
        return User(
            id=user_model.id,
            username=user_model.username,
            email=user_model.email,
            password_hash=user_model.password_hash,
            password_reset_token=user_model.password_reset_token,
            is_active=user_model.is_active,
            created_at=ensure_utc(user_model.created_at),
            updated_at=ensure_utc(user_model.updated_at),
        )

    def _to_model(self, user: User) -> UserModel:
        """Convert domain entity to database model."""
        return UserModel(
            id=user.id,
            username=user.username,
            email=user.email.lower(),
            password_hash=user.password_hash,
            password_reset_token=user.password_reset_token,
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
