"""In-memory email adapter for development and tests.

Renders every message exactly like the SMTP adapter, keeps it in an outbox
and logs the delivery instead of talking to a mail server.
"""

from email.mime.multipart import MIMEMultipart

from src.core.errors import DeliveryError
from src.core.result import Result, Success
from src.domain.enums import EmailTemplate
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.email.templates import render_email


class StubEmailService:
    """EmailServiceProtocol implementation that never leaves the process.

    Attributes:
        outbox: Every rendered message, oldest first.

    Example:
        >>> service = StubEmailService(logger=logger)
        >>> await service.send("user1@mail.com", EmailTemplate.PASSWORD_RESET, {"token": t})
        >>> t in service.last_raw_message
        True
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        *,
        sender: str = "My App <info@my-app.com>",
        frontend_url: str = "http://localhost:8080",
    ) -> None:
        self._logger = logger
        self._sender = sender
        self._frontend_url = frontend_url
        self.outbox: list[MIMEMultipart] = []

    @property
    def last_raw_message(self) -> str | None:
        """Raw RFC 5322 text of the most recent message, if any."""
        if not self.outbox:
            return None
        return self.outbox[-1].as_string()

    async def send(
        self,
        to_email: str,
        template: EmailTemplate,
        parameters: dict[str, str],
    ) -> Result[None, DeliveryError]:
        message = render_email(
            template,
            to_email,
            parameters,
            sender=self._sender,
            frontend_url=self._frontend_url,
        )
        self.outbox.append(message)
        self._logger.info(
            "email_sent",
            backend="stub",
            to_email=to_email,
            template=template.value,
            subject=message["Subject"],
        )
        return Success(value=None)
