"""Localized messages for API responses."""

from src.presentation.i18n.translations import (
    LOGOUT_SUCCESS,
    MESSAGES,
    PASSWORD_RESET_REQUEST_SUCCESS,
    PASSWORD_RESET_SUCCESS,
    USER_DELETE_SUCCESS,
    negotiate_language,
    translate,
)

__all__ = [
    "LOGOUT_SUCCESS",
    "MESSAGES",
    "PASSWORD_RESET_REQUEST_SUCCESS",
    "PASSWORD_RESET_SUCCESS",
    "USER_DELETE_SUCCESS",
    "negotiate_language",
    "translate",
]
