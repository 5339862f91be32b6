"""
Main FastAPI application entry point.

Builds the application instance and wires:
- Request context middleware (trace ID, request start time)
- Global exception handlers (localized error envelope)
- Versioned API routers and the system router
- Lifespan: token cleanup scheduler and database engine
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import settings
from src.core.container import (
    create_token_cleanup_scheduler,
    get_database,
    get_logger,
)
from src.presentation.routers import system_router
from src.presentation.routers.api.middleware import RequestContextMiddleware
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: create tables (development only), start token cleanup
    - Shutdown: stop token cleanup, dispose the engine

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    database = get_database()

    if settings.is_development:
        # Development convenience; other environments run alembic migrations.
        await database.create_all()

    # One scheduler per application, owned here and kept on app.state
    scheduler = create_token_cleanup_scheduler()
    scheduler.start()
    app.state.token_cleanup_scheduler = scheduler
    logger.info("application_started", environment=settings.environment.value)

    try:
        yield
    finally:
        await scheduler.stop()
        await database.close()
        logger.info("application_stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="User accounts, session tokens and password reset",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire request context middleware (trace ID, start time for error envelopes)
app.add_middleware(RequestContextMiddleware)

# Register global exception handlers (localized error envelope)
register_exception_handlers(app)

# Include routers
app.include_router(system_router)
app.include_router(v1_router)
