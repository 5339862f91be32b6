"""Domain-level error codes (machine-readable).

Each value doubles as the key of the localized message shown to API
clients, so renaming a value means updating both message catalogs in
``src/presentation/i18n``.

Categories:
- Validation errors (email and password policy)
- Resource errors (unknown email)
- Authorization errors (session token, reset token, ownership)
- Delivery errors (outgoing email)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    EMAIL_INVALID = "email_invalid"
    PASSWORD_NULL = "password_null"
    PASSWORD_SIZE = "password_size"
    PASSWORD_PATTERN = "password_pattern"
    VALIDATION_FAILURE = "validation_failure"

    # Resource errors
    EMAIL_NOT_IN_USE = "email_not_inuse"

    # Authentication errors
    AUTHENTICATION_FAILURE = "authentication_failure"

    # Authorization errors
    INVALID_TOKEN = "invalid_token"
    UNAUTHORIZED_PASSWORD_RESET = "unauthorized_password_reset"
    UNAUTHORIZED_USER_DELETE = "unauthorized_user_delete"

    # Delivery errors
    EMAIL_FAILURE = "email_failure"

    # Unexpected failures (storage outage, programming errors)
    INTERNAL_ERROR = "internal_error"
