"""Application environment types.

Used by Settings to pick environment-specific adapters (log renderer,
email backend, schema bootstrap).
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
