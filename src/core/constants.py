"""Centralized constants for internal implementation details.

These are fixed implementation details, NOT environment-specific
configuration. For tunable settings use ``src/core/config.py`` instead.

Example:
    >>> from src.core.constants import TOKEN_BYTES
    >>> token = secrets.token_hex(TOKEN_BYTES)
"""

# =============================================================================
# Token Lengths
# =============================================================================

TOKEN_BYTES: int = 32
"""Number of random bytes behind every opaque token (32 bytes = 256 bits)."""

TOKEN_HEX_LENGTH: int = 64
"""Length of hex-encoded token string (TOKEN_BYTES * 2)."""

# =============================================================================
# Password Policy
# =============================================================================

PASSWORD_MIN_LENGTH: int = 8
"""Minimum number of characters in a new password."""

PASSWORD_PATTERN: str = r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d).*$"
"""At least one lowercase letter, one uppercase letter and one digit."""

# =============================================================================
# Localization
# =============================================================================

DEFAULT_LANGUAGE: str = "en"
"""Message catalog used when Accept-Language names no supported language."""
