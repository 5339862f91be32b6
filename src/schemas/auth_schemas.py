"""Authentication request/response schemas.

Pydantic models for API request parsing and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Field contents (email format, password policy) are checked by the
application layer so failures come back as localized 400 envelopes;
these schemas only describe the JSON shape.

Endpoints:
    POST   /api/1.0/auth            - Login (issue session token)
    POST   /api/1.0/logout          - Logout (revoke session token)
    DELETE /api/1.0/users/{id}      - Delete own account
    POST   /api/1.0/users/password  - Request password reset email
    PUT    /api/1.0/users/password  - Set new password with reset token
"""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Login
# =============================================================================


class LoginRequest(BaseModel):
    """Request schema for login.

    POST /api/1.0/auth
    """

    email: str | None = Field(
        default=None,
        description="User's email address",
        examples=["user1@mail.com"],
    )
    password: str | None = Field(
        default=None,
        description="User's password",
        examples=["P4ssword"],
    )


class LoginResponse(BaseModel):
    """Response schema for login (200 OK)."""

    id: UUID = Field(..., description="Authenticated user's ID")
    username: str = Field(..., description="Authenticated user's display name")
    token: str = Field(..., description="Opaque bearer token for the Authorization header")


# =============================================================================
# Password reset
# =============================================================================


class PasswordResetRequest(BaseModel):
    """Request schema for starting a password reset.

    POST /api/1.0/users/password
    """

    email: str | None = Field(
        default=None,
        description="Email of the account to reset",
        examples=["user1@mail.com"],
    )


class PasswordUpdateRequest(BaseModel):
    """Request schema for completing a password reset.

    PUT /api/1.0/users/password
    """

    # Any JSON value is accepted; the token is checked before the password.
    password: Any = Field(
        default=None,
        description="New password (8+ chars, upper and lower case letter, digit)",
        examples=["N3wP4ssword"],
    )
    password_reset_token: Any = Field(
        default=None,
        alias="passwordResetToken",
        description="Token received by email",
    )

    model_config = ConfigDict(populate_by_name=True)


class MessageResponse(BaseModel):
    """Localized confirmation message."""

    message: str = Field(..., description="Human-readable message in the requested language")
