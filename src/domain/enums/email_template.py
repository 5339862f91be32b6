"""Kinds of outgoing email."""

from enum import Enum


class EmailTemplate(str, Enum):
    """Templates known to the email adapters."""

    PASSWORD_RESET = "password_reset"
