"""Repository implementations (adapters) for persistence layer.

SQLAlchemy implementations of the domain repository protocols.
"""

from src.infrastructure.persistence.repositories.token_repository import (
    TokenRepository,
)
from src.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "TokenRepository",
    "UserRepository",
]
