"""Users resource router.

Endpoints:
    DELETE /api/1.0/users/{user_id} - Delete own account (and its sessions)
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.services import AccountService
from src.core.container import get_account_service
from src.core.result import Failure, Success
from src.presentation.i18n import USER_DELETE_SUCCESS, negotiate_language, translate
from src.presentation.routers.api.middleware import (
    AuthenticatedSession,
    get_current_session_optional,
)
from src.presentation.routers.api.v1.errors import ErrorEnvelopeBuilder
from src.schemas import ErrorResponse, MessageResponse

users_router = APIRouter(prefix="/users", tags=["Users"])


@users_router.delete(
    "/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
    responses={
        403: {"description": "Not the owner of this account", "model": ErrorResponse},
    },
    summary="Delete user",
    description="Delete the account behind the bearer token.",
)
async def delete_user(
    request: Request,
    user_id: str,
    session: AuthenticatedSession | None = Depends(get_current_session_optional),
    service: AccountService = Depends(get_account_service),
) -> MessageResponse | JSONResponse:
    """Delete user.

    DELETE /api/1.0/users/{user_id} → 200 OK

    Args:
        request: FastAPI request object.
        user_id: Account to delete; must be the session owner.
        session: Validated bearer session, if any.
        service: Account service (injected).

    Returns:
        MessageResponse, or a 403 envelope.
    """
    requesting_user_id = session.user_id if session else None

    match await service.delete_account(requesting_user_id, user_id):
        case Success():
            language = negotiate_language(request.headers.get("accept-language"))
            return MessageResponse(message=translate(USER_DELETE_SUCCESS, language))
        case Failure(error=error):
            return ErrorEnvelopeBuilder.from_domain_error(error, request)
