"""UserRepository protocol (port) for domain layer.

Only the operations the session and password reset flows need. The reset
token lives on the user row; every write to it is a single-row UPDATE so
concurrent reset requests serialize at the storage layer and the later
write wins.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port).

    Implementations:
        - UserRepository (SQLAlchemy): src/infrastructure/persistence/repositories/
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID."""
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive).

        Args:
            email: Email address to search for.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_reset_token(self, reset_token: str) -> User | None:
        """Find the user currently holding exactly this reset token."""
        ...

    async def save(self, user: User) -> None:
        """Create new user in database.

        Args:
            user: User entity to persist.
        """
        ...

    async def set_reset_token(self, user_id: UUID, reset_token: str) -> bool:
        """Overwrite the user's reset token in one UPDATE.

        Any previously issued, unconsumed token stops working.

        Returns:
            True if the user row exists and was updated.
        """
        ...

    async def consume_reset_token(self, reset_token: str, password_hash: str) -> bool:
        """Swap password hash and clear the reset token in one UPDATE.

        The statement is conditional on the row still holding
        ``reset_token``, so a token can be consumed at most once even under
        concurrent requests.

        Args:
            reset_token: Token presented by the client.
            password_hash: Hash of the new password.

        Returns:
            True if the token was consumed by this call.
        """
        ...

    async def delete(self, user_id: UUID) -> bool:
        """Delete user by ID.

        Returns:
            True if a row was deleted.
        """
        ...
