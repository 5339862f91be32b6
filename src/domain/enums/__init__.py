"""Domain enums.

Usage:
    from src.domain.enums import EmailTemplate
"""

from src.domain.enums.email_template import EmailTemplate

__all__ = ["EmailTemplate"]
