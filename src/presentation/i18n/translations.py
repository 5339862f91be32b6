"""Message catalogs and Accept-Language negotiation.

Keys are ``ErrorCode`` values plus the success-message keys below.
Two catalogs ship: ``en`` (default) and ``br`` (Brazilian Portuguese).

Usage:
    from src.presentation.i18n import negotiate_language, translate

    language = negotiate_language(request.headers.get("accept-language"))
    message = translate(ErrorCode.EMAIL_NOT_IN_USE, language)
"""

from enum import Enum

from src.core.constants import DEFAULT_LANGUAGE

PASSWORD_RESET_REQUEST_SUCCESS = "password_reset_request_success"
PASSWORD_RESET_SUCCESS = "password_reset_success"
LOGOUT_SUCCESS = "logout_success"
USER_DELETE_SUCCESS = "user_delete_success"

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "email_invalid": "E-mail is not valid",
        "password_null": "Password cannot be null",
        "password_size": "Must have at least 8 characters",
        "password_pattern": (
            "Password must have at least 1 uppercase, 1 lowercase letter and 1 number"
        ),
        "validation_failure": "Validation Failure",
        "email_not_inuse": "E-mail not in use",
        "authentication_failure": "Incorrect credentials",
        "invalid_token": "Session is invalid or has expired",
        "unauthorized_password_reset": (
            "You are not authorized to update your password. "
            "Please follow the password reset steps again."
        ),
        "unauthorized_user_delete": "You are not authorized to delete user",
        "email_failure": "E-mail Failure",
        "internal_error": "An unexpected error occurred",
        PASSWORD_RESET_REQUEST_SUCCESS: "Check your e-mail for resetting your password",
        PASSWORD_RESET_SUCCESS: "Your password has been updated",
        LOGOUT_SUCCESS: "Logged out",
        USER_DELETE_SUCCESS: "User is deleted",
    },
    "br": {
        "email_invalid": "E-mail inválido",
        "password_null": "A senha não pode ser nula",
        "password_size": "Deve ter no mínimo 8 caracteres",
        "password_pattern": (
            "A senha deve ter pelo menos 1 letra maiúscula, 1 minúscula e 1 número"
        ),
        "validation_failure": "Falha de validação",
        "email_not_inuse": "E-mail não cadastrado",
        "authentication_failure": "Credenciais incorretas",
        "invalid_token": "Sessão inválida ou expirada",
        "unauthorized_password_reset": (
            "Você não está autorizado a atualizar sua senha. "
            "Por favor, siga os passos de redefinição de senha novamente."
        ),
        "unauthorized_user_delete": "Você não está autorizado a excluir o usuário",
        "email_failure": "Falha no envio de e-mail",
        "internal_error": "Ocorreu um erro inesperado",
        PASSWORD_RESET_REQUEST_SUCCESS: (
            "Verifique seu e-mail para redefinir sua senha"
        ),
        PASSWORD_RESET_SUCCESS: "Sua senha foi atualizada",
        LOGOUT_SUCCESS: "Sessão encerrada",
        USER_DELETE_SUCCESS: "Usuário excluído",
    },
}

# Language tags that select the Portuguese catalog.
_LANGUAGE_ALIASES = {"br": "br", "pt": "br", "pt-br": "br", "en": "en"}


def negotiate_language(accept_language: str | None) -> str:
    """Pick a catalog from an Accept-Language header.

    Honors q-values (``pt-BR;q=0.9, en;q=0.8``); the first supported tag with
    the highest weight wins. Missing, malformed or unsupported headers give
    the default language.

    Args:
        accept_language: Raw header value.

    Returns:
        Catalog key (``en`` or ``br``).
    """
    if not accept_language:
        return DEFAULT_LANGUAGE

    candidates: list[tuple[float, int, str]] = []
    for position, part in enumerate(accept_language.split(",")):
        tag, _, params = part.strip().partition(";")
        tag = tag.strip().lower()
        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                quality = 0.0
        language = _LANGUAGE_ALIASES.get(tag) or _LANGUAGE_ALIASES.get(
            tag.split("-")[0]
        )
        if language and quality > 0:
            candidates.append((-quality, position, language))

    if not candidates:
        return DEFAULT_LANGUAGE
    return min(candidates)[2]


def translate(key: str | Enum, language: str = DEFAULT_LANGUAGE) -> str:
    """Look up a message, falling back to English and then to the key itself."""
    raw_key = key.value if isinstance(key, Enum) else key
    catalog = MESSAGES.get(language, MESSAGES[DEFAULT_LANGUAGE])
    return catalog.get(raw_key) or MESSAGES[DEFAULT_LANGUAGE].get(raw_key, raw_key)
