"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL / SQLite)
- Password hashing (bcrypt)
- Opaque token generation
- Clock
- Email (stub / SMTP)
- Logging (structlog console)
- Token cleanup scheduler (a plain factory; the app lifespan owns the instance)
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.clock_protocol import ClockProtocol
    from src.domain.protocols.email_service_protocol import EmailServiceProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
    from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol
    from src.infrastructure.jobs.token_cleanup_scheduler import TokenCleanupScheduler


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for per-request sessions.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns BcryptPasswordService with the configured cost factor.
    """
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_token_generator() -> "TokenGenerationProtocol":
    """Get opaque token generator singleton (session and reset tokens)."""
    from src.infrastructure.security import OpaqueTokenService

    return OpaqueTokenService()


@lru_cache()
def get_clock() -> "ClockProtocol":
    from src.infrastructure.clock import SystemClock

    return SystemClock()


@lru_cache()
def get_email_service() -> "EmailServiceProtocol":
    """Get email service singleton (app-scoped).

    Container owns factory logic - picks the adapter from EMAIL_BACKEND:
        - stub: StubEmailService (in-memory outbox, logs to console)
        - smtp: SmtpEmailService (SMTP relay)
    """
    if settings.email_backend == "smtp":
        from src.infrastructure.email import SmtpEmailService

        return SmtpEmailService(
            host=settings.smtp_host,
            port=settings.smtp_port,
            sender=settings.mail_from,
            frontend_url=settings.frontend_url,
            logger=get_logger(),
            username=settings.smtp_username,
            password=settings.smtp_password,
            use_tls=settings.smtp_use_tls,
            timeout=settings.smtp_timeout_seconds,
        )

    from src.infrastructure.email import StubEmailService

    return StubEmailService(
        logger=get_logger(),
        sender=settings.mail_from,
        frontend_url=settings.frontend_url,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level="DEBUG" if settings.debug else settings.log_level,
        service=settings.app_name.lower(),
    )


def create_token_cleanup_scheduler() -> "TokenCleanupScheduler":
    """Build a new, not yet started, token cleanup scheduler.

    Not cached: the FastAPI lifespan creates the one instance, keeps it on
    ``app.state`` and stops it on shutdown.
    """
    from src.infrastructure.jobs.token_cleanup_scheduler import (
        TokenCleanupScheduler,
    )

    return TokenCleanupScheduler(
        database=get_database(),
        clock=get_clock(),
        logger=get_logger(),
        interval=settings.token_cleanup_interval,
        inactivity_threshold=settings.session_inactivity,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Creates new session per request with automatic transaction management:
        - Commits on success
        - Rolls back on exception
        - Always closes session

    Usage:
        @router.delete("/users/{user_id}")
        async def delete_user(session: AsyncSession = Depends(get_db_session)):
            ...
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
