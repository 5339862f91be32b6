"""Password value object with policy validation.

Immutable value object for a candidate new password. Constructing one
directly raises ``ValueError``; ``Password.create`` returns a Result with a
distinct error code per violated rule.
"""

import re
from dataclasses import dataclass

from src.core.constants import PASSWORD_MIN_LENGTH, PASSWORD_PATTERN
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success

_POLICY_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.PASSWORD_NULL: "Password cannot be null",
    ErrorCode.PASSWORD_SIZE: f"Password must be at least {PASSWORD_MIN_LENGTH} characters",
    ErrorCode.PASSWORD_PATTERN: (
        "Password must have at least 1 uppercase, 1 lowercase letter and 1 number"
    ),
}


def check_password_policy(value: object) -> ErrorCode | None:
    """Return the first violated policy rule, or None if the password is valid.

    Rules, in evaluation order:
        - not null
        - a string (numbers, lists and objects fail the pattern rule)
        - at least 8 characters
        - at least one lowercase letter, one uppercase letter and one digit
    """
    if value is None:
        return ErrorCode.PASSWORD_NULL
    if not isinstance(value, str):
        return ErrorCode.PASSWORD_PATTERN
    if len(value) < PASSWORD_MIN_LENGTH:
        return ErrorCode.PASSWORD_SIZE
    if not re.match(PASSWORD_PATTERN, value):
        return ErrorCode.PASSWORD_PATTERN
    return None


@dataclass(frozen=True)
class Password:
    """Password value object with policy validation.

    Attributes:
        value: The password string (validated)

    Raises:
        ValueError: If password does not meet the policy

    Example:
        >>> Password("P4ssword").value
        'P4ssword'
        >>> Password.create("alllowercase")
        Failure(error=ValidationError(code=<ErrorCode.PASSWORD_PATTERN: ...>, ...))
    """

    value: str

    def __post_init__(self) -> None:
        violation = check_password_policy(self.value)
        if violation is not None:
            raise ValueError(_POLICY_MESSAGES[violation])

    @classmethod
    def create(cls, value: object) -> Result["Password", ValidationError]:
        """Validate ``value`` and wrap it.

        Returns:
            Success(Password) or Failure(ValidationError) with field
            ``password`` and one of PASSWORD_NULL, PASSWORD_SIZE,
            PASSWORD_PATTERN.
        """
        violation = check_password_policy(value)
        if violation is not None:
            return Failure(
                error=ValidationError(
                    code=violation,
                    message=_POLICY_MESSAGES[violation],
                    field="password",
                )
            )
        return Success(value=cls(value))  # type: ignore[arg-type]

    def __str__(self) -> str:
        """Return masked password so it never reaches logs."""
        return "*" * len(self.value)

    def __repr__(self) -> str:
        return f"Password('{'*' * len(self.value)}')"
