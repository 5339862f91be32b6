"""Validation helpers for request input.

All helpers return Result types so callers can collect failures per field.

Usage:
    from src.core.validation import validate_email

    match validate_email(payload.email):
        case Success(value=email):
            ...
        case Failure(error=error):
            errors[error.field] = error.code
"""

import re

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def validate_email(email: str | None) -> Result[str, ValidationError]:
    """Validate email presence and format.

    Args:
        email: Raw email from the request body (may be missing).

    Returns:
        Success with the trimmed email, Failure with ValidationError otherwise.
    """
    candidate = email.strip() if isinstance(email, str) else ""
    if not EMAIL_PATTERN.match(candidate):
        return Failure(
            error=ValidationError(
                code=ErrorCode.EMAIL_INVALID,
                message="Invalid email format",
                field="email",
            )
        )
    return Success(value=candidate)
