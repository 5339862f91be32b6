"""Error envelope builder.

Turns domain errors into the JSON envelope every failing endpoint returns:

    {"path": "/api/1.0/users/password", "timestamp": 1700000000123,
     "message": "E-mail not in use"}

400 responses additionally carry ``validationErrors: {field: message}``.

Exports:
    ErrorEnvelopeBuilder: Utility class for building error responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.core.enums import ErrorCode
from src.core.errors import (
    AuthenticationError,
    DeliveryError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from src.presentation.i18n import negotiate_language, translate
from src.presentation.routers.api.middleware.request_context_middleware import (
    now_millis,
)
from src.schemas.common_schemas import ErrorResponse


class ErrorEnvelopeBuilder:
    """Build localized error envelopes.

    Example:
        >>> error = NotFoundError(
        ...     code=ErrorCode.EMAIL_NOT_IN_USE,
        ...     message="E-mail not in use",
        ...     resource_type="User",
        ...     resource_id="user1@mail.com",
        ... )
        >>> response = ErrorEnvelopeBuilder.from_domain_error(error, request)
        >>> # Returns 404 with the message in the request's language
    """

    @staticmethod
    def from_domain_error(error: DomainError, request: Request) -> JSONResponse:
        """Convert a domain error to its HTTP response.

        Args:
            error: Failure returned by an application service.
            request: Current request (path, language, start time).

        Returns:
            JSONResponse with the status mapped from the error type.
        """
        if isinstance(error, ValidationError):
            return ErrorEnvelopeBuilder.validation_failure(
                request, {error.field or "body": error.code.value}
            )

        language = negotiate_language(request.headers.get("accept-language"))
        return ErrorEnvelopeBuilder.build(
            request,
            status_code=ErrorEnvelopeBuilder.get_status_code(error),
            message=translate(error.code, language),
        )

    @staticmethod
    def validation_failure(
        request: Request, field_errors: dict[str, str]
    ) -> JSONResponse:
        """Build a 400 envelope.

        Args:
            request: Current request.
            field_errors: Message key per invalid field.
        """
        language = negotiate_language(request.headers.get("accept-language"))
        return ErrorEnvelopeBuilder.build(
            request,
            status_code=status.HTTP_400_BAD_REQUEST,
            message=translate(ErrorCode.VALIDATION_FAILURE, language),
            validation_errors={
                field: translate(key, language) for field, key in field_errors.items()
            },
        )

    @staticmethod
    def build(
        request: Request,
        *,
        status_code: int,
        message: str,
        validation_errors: dict[str, str] | None = None,
    ) -> JSONResponse:
        envelope = ErrorResponse(
            path=request.url.path,
            timestamp=ErrorEnvelopeBuilder.timestamp(request),
            message=message,
            validation_errors=validation_errors,
        )
        return JSONResponse(
            status_code=status_code,
            content=envelope.model_dump(by_alias=True, exclude_none=True),
        )

    @staticmethod
    def timestamp(request: Request) -> int:
        """Epoch millis, strictly after the start time recorded by middleware."""
        started_at_ms = getattr(request.state, "started_at_ms", None)
        now_ms = now_millis()
        if started_at_ms is None:
            return now_ms
        return max(now_ms, started_at_ms + 1)

    @staticmethod
    def get_status_code(error: DomainError) -> int:
        """Map a domain error type to an HTTP status code.

        Example:
            >>> ErrorEnvelopeBuilder.get_status_code(DeliveryError(...))
            502
        """
        mapping: dict[type[DomainError], int] = {
            ValidationError: status.HTTP_400_BAD_REQUEST,
            AuthenticationError: status.HTTP_401_UNAUTHORIZED,
            ForbiddenError: status.HTTP_403_FORBIDDEN,
            NotFoundError: status.HTTP_404_NOT_FOUND,
            DeliveryError: status.HTTP_502_BAD_GATEWAY,
        }
        return mapping.get(type(error), status.HTTP_500_INTERNAL_SERVER_ERROR)
