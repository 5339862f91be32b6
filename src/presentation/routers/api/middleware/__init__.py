"""HTTP middleware and request dependencies."""

from src.presentation.routers.api.middleware.auth_dependencies import (
    AuthenticatedSession,
    get_current_session_optional,
)
from src.presentation.routers.api.middleware.request_context_middleware import (
    RequestContextMiddleware,
)

__all__ = [
    "AuthenticatedSession",
    "RequestContextMiddleware",
    "get_current_session_optional",
]
