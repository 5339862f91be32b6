"""Session token database model.

One row per live login session. The token column holds the opaque bearer
value itself: it is a random lookup key with no payload, and validation
needs an indexed equality match on it.

Lifecycle:
    - Created on login (last_used_at = now)
    - last_used_at advanced by every successful validation
    - Deleted on logout, by a validation that finds it stale, or by the
      hourly cleanup job once last_used_at is older than the inactivity
      threshold
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class AuthToken(BaseModel):
    """Session token model.

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: Timestamp of login (from BaseModel)
        token: Opaque bearer value (unique, indexed)
        user_id: Owner (FK to users.id, cascade delete)
        last_used_at: Last successful validation (indexed for bulk eviction)
    """

    __tablename__ = "auth_tokens"

    token: Mapped[str] = mapped_column(
        String(128),
        nullable=False,
        unique=True,
        index=True,
        comment="Opaque bearer token value",
    )

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="User who owns this session",
    )

    last_used_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        comment="Last successful validation (sliding expiration anchor)",
    )

    def __repr__(self) -> str:
        return f"<AuthToken(id={self.id}, user_id={self.user_id}, last_used_at={self.last_used_at})>"
