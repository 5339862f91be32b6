"""Request/response schemas for API endpoints.

Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import LoginRequest, ErrorResponse
"""

from src.schemas.auth_schemas import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    PasswordResetRequest,
    PasswordUpdateRequest,
)
from src.schemas.common_schemas import ErrorResponse

__all__ = [
    "ErrorResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "PasswordResetRequest",
    "PasswordUpdateRequest",
]
