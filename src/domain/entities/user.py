"""User domain entity.

Pure business logic, no framework dependencies. Only the fields the
session and password reset flows touch are modeled.

Password Reset:
    - password_reset_token: single-use opaque value, None when no reset
      is pending. A new reset request overwrites it; a successful reset
      clears it together with the password hash change.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class User:
    """User domain entity.

    Attributes:
        id: Unique user identifier
        username: Display name
        email: User email address (unique, stored lowercase)
        password_hash: Bcrypt hashed password (never plaintext)
        password_reset_token: Pending reset token, if any
        is_active: Account active status (inactive users cannot log in)
        created_at: Timestamp when user was created
        updated_at: Timestamp when user was last updated

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     username="user1",
        ...     email="user1@mail.com",
        ...     password_hash="$2b$12$...",
        ... )
        >>> user.has_pending_reset()
        False
    """

    id: UUID
    username: str
    email: str
    password_hash: str
    password_reset_token: str | None = None
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def has_pending_reset(self) -> bool:
        """Check if a password reset token is waiting to be consumed."""
        return self.password_reset_token is not None

    def can_login(self) -> bool:
        return self.is_active
