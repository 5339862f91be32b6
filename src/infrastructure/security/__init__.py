"""Security infrastructure adapters.

- BcryptPasswordService: password hashing
- OpaqueTokenService: random session and password reset tokens
"""

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.opaque_token_service import OpaqueTokenService

__all__ = [
    "BcryptPasswordService",
    "OpaqueTokenService",
]
