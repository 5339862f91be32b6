"""Common error classes used across all layers.

Error Types:
- ValidationError: Malformed input or password-policy violation (400)
- NotFoundError: No user behind the given email (404)
- ForbiddenError: Unknown, expired or consumed token; not the owner (403)
- AuthenticationError: Wrong login credentials (401)
- DeliveryError: Outgoing email could not be handed off (502)

Usage:
    from src.core.errors import ValidationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.PASSWORD_SIZE,
        message="Password must be at least 8 characters",
        field="password",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Request field that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (User).
        resource_id: Identifier that was looked up (an email address).
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ForbiddenError(DomainError):
    """Caller holds no usable credential for the operation.

    Covers "never existed", "expired" and "already consumed" alike so the
    response never reveals which one applied.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Login failure (unknown email, wrong password, inactive account)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class DeliveryError(DomainError):
    """Outgoing message could not be delivered.

    Attributes:
        service_name: Name of the delivery backend (smtp, stub).
    """

    service_name: str
