"""TokenRepository protocol (port) for session token persistence.

Session tokens are opaque lookup keys. The repository owns the atomic
storage operations that keep concurrent validation, logout and background
eviction consistent with each other:

- touch: one conditional UPDATE (alive check + lastUsedAt advance)
- delete_if_stale: one conditional DELETE (never removes a token a
  concurrent touch just revived)
- delete_older_than: one bulk DELETE per cleanup tick
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID


@dataclass(slots=True, kw_only=True)
class TokenData:
    """Data transfer object for a persisted session token.

    Attributes:
        value: Opaque token string handed to the client.
        user_id: Owner of the session.
        last_used_at: Last successful validation (timezone-aware UTC).
    """

    value: str
    user_id: UUID
    last_used_at: datetime


class TokenRepository(Protocol):
    """Protocol for session token persistence operations.

    Token Lifecycle:
        1. Created on login with last_used_at = now
        2. Touched on every successful validation (sliding expiration)
        3. Deleted on logout, on a validation that finds it stale,
           or by the hourly bulk eviction

    Implementations:
        - TokenRepository (SQLAlchemy): src/infrastructure/persistence/repositories/
    """

    async def save(self, token: TokenData) -> None:
        """Persist a new token.

        Args:
            token: Token to create. ``value`` must be unique.
        """
        ...

    async def find_by_value(self, value: str) -> TokenData | None:
        """Find a token by its opaque value, regardless of age."""
        ...

    async def touch(self, value: str, now: datetime, cutoff: datetime) -> UUID | None:
        """Advance last_used_at of a live token in one atomic operation.

        A token is live when ``last_used_at >= cutoff``. The new
        ``last_used_at`` is the later of its current value and ``now``,
        so the timestamp never moves backward.

        Args:
            value: Opaque token value.
            now: Current time.
            cutoff: Oldest last_used_at still considered live.

        Returns:
            Owner user_id if the token was live and touched, None otherwise.
        """
        ...

    async def delete_if_stale(self, value: str, cutoff: datetime) -> bool:
        """Delete the token only if ``last_used_at < cutoff``.

        Returns:
            True if a row was deleted.
        """
        ...

    async def delete_by_value(self, value: str) -> bool:
        """Delete a token unconditionally.

        Returns:
            True if a row was deleted, False if the token did not exist.
        """
        ...

    async def delete_older_than(self, cutoff: datetime) -> int:
        """Bulk-delete every token with ``last_used_at < cutoff``.

        Single storage-level statement, no per-row iteration.

        Returns:
            Number of deleted tokens.
        """
        ...

    async def delete_all_for_user(self, user_id: UUID) -> int:
        """Delete every session token owned by ``user_id``.

        Returns:
            Number of deleted tokens.
        """
        ...
