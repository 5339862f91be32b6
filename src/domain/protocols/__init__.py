"""Domain protocols (ports) package.

Protocol definitions the domain and application layers depend on.
Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import TokenRepository, UserRepository
    from src.domain.protocols import EmailServiceProtocol, LoggerProtocol
"""

# Service protocols
from src.domain.protocols.clock_protocol import ClockProtocol
from src.domain.protocols.email_service_protocol import EmailServiceProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol

# Repository protocols
from src.domain.protocols.token_repository import TokenData, TokenRepository
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    "ClockProtocol",
    "EmailServiceProtocol",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "TokenGenerationProtocol",
    "TokenData",
    "TokenRepository",
    "UserRepository",
]
