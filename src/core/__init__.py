"""Core shared kernel.

Foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Domain error taxonomy and error codes
- Input validation helpers

The core module has NO dependencies on other application layers.
"""

from src.core.enums import ErrorCode
from src.core.errors import (
    AuthenticationError,
    DeliveryError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from src.core.result import Failure, Result, Success

__all__ = [
    "AuthenticationError",
    "DeliveryError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "ForbiddenError",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
]
