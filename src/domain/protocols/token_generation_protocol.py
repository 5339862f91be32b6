"""Opaque token generation protocol.

Session tokens and password reset tokens are both random lookup keys with no
decodable payload. This port hides how the randomness is produced.
"""

from typing import Protocol


class TokenGenerationProtocol(Protocol):
    """Generates cryptographically random, collision-resistant strings.

    Implementations:
        - OpaqueTokenService: ``secrets.token_hex`` (production)
    """

    def generate_token(self) -> str:
        """Return a new opaque token value."""
        ...
