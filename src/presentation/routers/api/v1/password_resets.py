"""Password reset router.

Endpoints:
    POST /api/1.0/users/password - Request a reset email
    PUT  /api/1.0/users/password - Set a new password with the emailed token
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.services import PasswordResetService
from src.core.container import get_password_reset_service
from src.core.result import Failure, Success
from src.core.validation import validate_email
from src.presentation.i18n import (
    PASSWORD_RESET_REQUEST_SUCCESS,
    PASSWORD_RESET_SUCCESS,
    negotiate_language,
    translate,
)
from src.presentation.routers.api.v1.errors import ErrorEnvelopeBuilder
from src.schemas import (
    ErrorResponse,
    MessageResponse,
    PasswordResetRequest,
    PasswordUpdateRequest,
)

password_resets_router = APIRouter(prefix="/users/password", tags=["Password Resets"])


@password_resets_router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
    responses={
        400: {"description": "Malformed email", "model": ErrorResponse},
        404: {"description": "No account with this email", "model": ErrorResponse},
        502: {"description": "Reset email could not be sent", "model": ErrorResponse},
    },
    summary="Request password reset",
    description="Store a new reset token on the account and email it.",
)
async def request_password_reset(
    request: Request,
    data: PasswordResetRequest,
    service: PasswordResetService = Depends(get_password_reset_service),
) -> MessageResponse | JSONResponse:
    """Request password reset.

    POST /api/1.0/users/password → 200 OK

    Args:
        request: FastAPI request object.
        data: Reset request (email).
        service: Password reset service (injected).

    Returns:
        MessageResponse, or a 400/404/502 envelope.
    """
    email_result = validate_email(data.email)
    if isinstance(email_result, Failure):
        return ErrorEnvelopeBuilder.from_domain_error(email_result.error, request)

    match await service.request_reset(email_result.value):
        case Success():
            language = negotiate_language(request.headers.get("accept-language"))
            return MessageResponse(
                message=translate(PASSWORD_RESET_REQUEST_SUCCESS, language)
            )
        case Failure(error=error):
            return ErrorEnvelopeBuilder.from_domain_error(error, request)


@password_resets_router.put(
    "",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
    responses={
        400: {"description": "Password breaks the policy", "model": ErrorResponse},
        403: {"description": "Unknown or consumed reset token", "model": ErrorResponse},
    },
    summary="Reset password",
    description="Replace the password and consume the reset token.",
)
async def update_password(
    request: Request,
    data: PasswordUpdateRequest,
    service: PasswordResetService = Depends(get_password_reset_service),
) -> MessageResponse | JSONResponse:
    """Reset password.

    PUT /api/1.0/users/password → 200 OK

    The token is checked first: an unknown token is 403 whatever the
    password looks like. A policy violation is 400 and leaves the token
    usable.
    """
    result = await service.validate_and_consume(
        data.password_reset_token, data.password
    )

    match result:
        case Success():
            language = negotiate_language(request.headers.get("accept-language"))
            return MessageResponse(message=translate(PASSWORD_RESET_SUCCESS, language))
        case Failure(error=error):
            return ErrorEnvelopeBuilder.from_domain_error(error, request)
