"""Opaque token generation service.

Session tokens and password reset tokens are random lookup keys. They
carry no payload and are stored as-is: 256 bits of entropy make them
unguessable, and lookups need an exact indexed match.
"""

import secrets

from src.core.constants import TOKEN_BYTES


class OpaqueTokenService:
    """Random token generator implementing TokenGenerationProtocol.

    Example:
        >>> service = OpaqueTokenService()
        >>> token = service.generate_token()
        >>> len(token)
        64
    """

    def __init__(self, token_bytes: int = TOKEN_BYTES) -> None:
        self._token_bytes = token_bytes

    def generate_token(self) -> str:
        """Return a hex string backed by ``token_bytes`` random bytes."""
        return secrets.token_hex(self._token_bytes)
