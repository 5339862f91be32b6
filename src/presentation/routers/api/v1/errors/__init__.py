"""Error responses for the versioned API."""

from src.presentation.routers.api.v1.errors.error_envelope import (
    ErrorEnvelopeBuilder,
)
from src.presentation.routers.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)

__all__ = ["ErrorEnvelopeBuilder", "register_exception_handlers"]
