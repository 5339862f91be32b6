"""Database models for persistence layer.

SQLAlchemy models that map to database tables. These are infrastructure
concerns and should not be imported by the domain layer.

Models Organization:
    - user.py: User model (credentials, pending reset token)
    - auth_token.py: Session token model

Note:
    Domain entities (dataclasses) live in src/domain/entities/
    Database models live here and are mapped via the repository layer.
"""

from src.infrastructure.persistence.models.auth_token import AuthToken
from src.infrastructure.persistence.models.user import User

__all__ = [
    "AuthToken",
    "User",
]
