"""API v1 routers.

Resources:
    /api/1.0/auth             - Login
    /api/1.0/logout           - Logout
    /api/1.0/users/{id}       - Account deletion
    /api/1.0/users/password   - Password reset request and completion
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.auth_tokens import auth_tokens_router
from src.presentation.routers.api.v1.password_resets import password_resets_router
from src.presentation.routers.api.v1.users import users_router

v1_router = APIRouter(prefix=settings.api_prefix)
# password routes first: "/users/password" must not be read as a user id
v1_router.include_router(password_resets_router)
v1_router.include_router(auth_tokens_router)
v1_router.include_router(users_router)

__all__ = [
    "v1_router",
]
