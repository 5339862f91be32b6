"""EmailServiceProtocol - Domain protocol for outgoing email.

Following hexagonal architecture:
- Domain defines what it needs (protocol/port)
- Infrastructure provides implementation (adapter)
- Application layer uses protocol, not concrete implementation
"""

from typing import Protocol

from src.core.errors import DeliveryError
from src.core.result import Result
from src.domain.enums.email_template import EmailTemplate


class EmailServiceProtocol(Protocol):
    """Protocol for templated email delivery.

    Implementations:
        - StubEmailService: src/infrastructure/email/stub_email_service.py (dev/test)
        - SmtpEmailService: src/infrastructure/email/smtp_email_service.py
    """

    async def send(
        self,
        to_email: str,
        template: EmailTemplate,
        parameters: dict[str, str],
    ) -> Result[None, DeliveryError]:
        """Render ``template`` with ``parameters`` and deliver it.

        For ``EmailTemplate.PASSWORD_RESET`` the raw message contains the
        literal recipient address and the literal ``parameters["token"]``.

        Args:
            to_email: Recipient email address.
            template: Kind of message to render.
            parameters: Template parameters.

        Returns:
            Success(None) once the message is handed off, or
            Failure(DeliveryError) when the transport rejects it.
        """
        ...
