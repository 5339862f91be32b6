"""Result types for railway-oriented programming.

Operations that can fail for business reasons (unknown token, unknown email,
weak password, undeliverable mail) return a Result instead of raising, so
every caller has to handle the failure branch explicitly.

Usage:
    result = await token_service.validate(token_value)
    match result:
        case Success(value=user_id):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome carrying ``error``."""

    error: E


Result: TypeAlias = Success[T] | Failure[E]
