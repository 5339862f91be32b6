"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for every business failure in the service.
Errors flow through the system as data inside ``Failure``; they are never
raised. Storage outages are the exception: SQLAlchemy errors propagate as
real exceptions and are turned into a generic 500 at the HTTP boundary.

Usage:
    from src.core.errors import DomainError

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code, also the message-catalog key.
        message: English fallback message for logs.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
