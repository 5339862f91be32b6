"""Email service implementations.

- StubEmailService: in-memory outbox for development/testing
- SmtpEmailService: delivery through an SMTP relay
"""

from src.infrastructure.email.smtp_email_service import SmtpEmailService
from src.infrastructure.email.stub_email_service import StubEmailService

__all__ = [
    "SmtpEmailService",
    "StubEmailService",
]
