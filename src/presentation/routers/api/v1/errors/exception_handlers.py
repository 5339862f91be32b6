"""Global exception handlers for FastAPI application.

Every failure that escapes a route handler still leaves as the standard
error envelope.

Handlers:
    validation_exception_handler: Malformed request body -> 400
    http_exception_handler: HTTPException (404 routes, 405 methods, ...)
    generic_exception_handler: Storage outages and bugs -> 500

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.container import get_logger
from src.core.enums import ErrorCode
from src.presentation.i18n import negotiate_language, translate
from src.presentation.routers.api.v1.errors.error_envelope import (
    ErrorEnvelopeBuilder,
)


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError (unparseable body) to a 400 envelope.

    Example:
        >>> # PUT /api/1.0/users/password with body {"password": 12}
        >>> # {"path": "...", "timestamp": ..., "message": "Validation Failure",
        >>> #  "validationErrors": {"password": "Validation Failure"}}
    """
    assert isinstance(exc, RequestValidationError)

    field_errors: dict[str, str] = {}
    for error in exc.errors():
        # ["body", "email"] -> "email"
        field_parts = [str(p) for p in error.get("loc", []) if p != "body"]
        field_name = ".".join(field_parts) if field_parts else "body"
        field_errors[field_name] = ErrorCode.VALIDATION_FAILURE.value

    return ErrorEnvelopeBuilder.validation_failure(request, field_errors)


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert HTTPException to the error envelope.

    ``detail`` is treated as a message key when a catalog entry exists,
    otherwise it is passed through.
    """
    assert isinstance(exc, StarletteHTTPException)

    language = negotiate_language(request.headers.get("accept-language"))
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    response = ErrorEnvelopeBuilder.build(
        request,
        status_code=exc.status_code,
        message=translate(detail, language),
    )
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions (database unavailable, bugs).

    The exception is logged with the trace ID; the client only sees the
    generic ``internal_error`` message.
    """
    get_logger().error(
        "unhandled_exception",
        error=exc,
        trace_id=getattr(request.state, "trace_id", None),
        request_path=request.url.path,
        request_method=request.method,
    )

    language = negotiate_language(request.headers.get("accept-language"))
    return ErrorEnvelopeBuilder.build(
        request,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message=translate(ErrorCode.INTERNAL_ERROR, language),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Example:
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
