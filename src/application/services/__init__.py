"""Application services.

- TokenService: session tokens (issue, validate, revoke)
- PasswordResetService: reset token issuance and consumption
- AuthenticationService: login
- AccountService: self-service account deletion
"""

from src.application.services.account_service import AccountService
from src.application.services.authentication_service import (
    AuthenticationService,
    LoginResult,
)
from src.application.services.password_reset_service import PasswordResetService
from src.application.services.token_service import TokenService

__all__ = [
    "AccountService",
    "AuthenticationService",
    "LoginResult",
    "PasswordResetService",
    "TokenService",
]
