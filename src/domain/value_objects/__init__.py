"""Domain value objects with validation.

Immutable value objects that enforce business constraints.
"""

from src.domain.value_objects.password import Password, check_password_policy

__all__ = [
    "Password",
    "check_password_policy",
]
