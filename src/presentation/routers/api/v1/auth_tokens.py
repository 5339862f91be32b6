"""Session token router (login and logout).

Endpoints:
    POST /api/1.0/auth   - Verify credentials and issue a session token
    POST /api/1.0/logout - Revoke the presented session token
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.services import AuthenticationService, TokenService
from src.core.container import get_authentication_service, get_token_service
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.presentation.i18n import LOGOUT_SUCCESS, negotiate_language, translate
from src.presentation.routers.api.middleware import (
    AuthenticatedSession,
    get_current_session_optional,
)
from src.presentation.routers.api.v1.errors import ErrorEnvelopeBuilder
from src.schemas import ErrorResponse, LoginRequest, LoginResponse, MessageResponse

auth_tokens_router = APIRouter(tags=["Authentication"])


@auth_tokens_router.post(
    "/auth",
    status_code=status.HTTP_200_OK,
    response_model=LoginResponse,
    responses={
        401: {"description": "Incorrect credentials", "model": ErrorResponse},
    },
    summary="Login",
    description="Authenticate with email and password. Returns a bearer token.",
)
async def login(
    request: Request,
    data: LoginRequest,
    service: AuthenticationService = Depends(get_authentication_service),
) -> LoginResponse | JSONResponse:
    """Login.

    POST /api/1.0/auth → 200 OK

    Args:
        request: FastAPI request object.
        data: Credentials (email, password).
        service: Authentication service (injected).

    Returns:
        LoginResponse with the new session token, or a 401 envelope.
    """
    if not data.email or not data.password:
        language = negotiate_language(request.headers.get("accept-language"))
        return ErrorEnvelopeBuilder.build(
            request,
            status_code=status.HTTP_401_UNAUTHORIZED,
            message=translate(ErrorCode.AUTHENTICATION_FAILURE, language),
        )

    match await service.login(data.email, data.password):
        case Success(value=login_result):
            return LoginResponse(
                id=login_result.user_id,
                username=login_result.username,
                token=login_result.token,
            )
        case Failure(error=error):
            return ErrorEnvelopeBuilder.from_domain_error(error, request)


@auth_tokens_router.post(
    "/logout",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
    summary="Logout",
    description="Revoke the bearer token. Succeeds even without a valid token.",
)
async def logout(
    request: Request,
    session: AuthenticatedSession | None = Depends(get_current_session_optional),
    token_service: TokenService = Depends(get_token_service),
) -> MessageResponse:
    """Logout.

    POST /api/1.0/logout → 200 OK
    """
    if session is not None:
        await token_service.revoke(session.token)

    language = negotiate_language(request.headers.get("accept-language"))
    return MessageResponse(message=translate(LOGOUT_SUCCESS, language))
