"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_token_service, ...

Organization:
- infrastructure: app-scoped singletons (db, logging, email, scheduler)
- repositories: request-scoped repositories
- auth_services: request-scoped application services
"""

# Infrastructure services
from src.core.container.infrastructure import (
    create_token_cleanup_scheduler,
    get_clock,
    get_database,
    get_db_session,
    get_email_service,
    get_logger,
    get_password_service,
    get_token_generator,
)

# Repositories
from src.core.container.repositories import (
    get_token_repository,
    get_user_repository,
)

# Application services
from src.core.container.auth_services import (
    get_account_service,
    get_authentication_service,
    get_password_reset_service,
    get_token_service,
)

__all__ = [
    # Infrastructure
    "create_token_cleanup_scheduler",
    "get_clock",
    "get_database",
    "get_db_session",
    "get_email_service",
    "get_logger",
    "get_password_service",
    "get_token_generator",
    # Repositories
    "get_token_repository",
    "get_user_repository",
    # Application services
    "get_account_service",
    "get_authentication_service",
    "get_password_reset_service",
    "get_token_service",
]
