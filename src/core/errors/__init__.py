"""Core errors package.

Usage:
    from src.core.errors import DomainError, ValidationError, ForbiddenError
"""

from src.core.errors.common_errors import (
    AuthenticationError,
    DeliveryError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from src.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ForbiddenError",
    "AuthenticationError",
    "DeliveryError",
]
