"""SMTP email adapter.

smtplib is blocking, so each delivery runs on a worker thread via
``asyncio.to_thread`` and the event loop keeps serving requests.
"""

import asyncio
import smtplib
from email.mime.multipart import MIMEMultipart

from src.core.enums import ErrorCode
from src.core.errors import DeliveryError
from src.core.result import Failure, Result, Success
from src.domain.enums import EmailTemplate
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.email.templates import render_email


class SmtpEmailService:
    """EmailServiceProtocol implementation delivering through an SMTP relay.

    Usage:
        service = SmtpEmailService(
            host=settings.smtp_host,
            port=settings.smtp_port,
            sender=settings.mail_from,
            frontend_url=settings.frontend_url,
            logger=get_logger(),
        )
        result = await service.send(email, EmailTemplate.PASSWORD_RESET, {"token": token})
    """

    def __init__(
        self,
        *,
        host: str,
        port: int,
        sender: str,
        frontend_url: str,
        logger: LoggerProtocol,
        username: str | None = None,
        password: str | None = None,
        use_tls: bool = False,
        timeout: float = 10.0,
    ) -> None:
        self._host = host
        self._port = port
        self._sender = sender
        self._frontend_url = frontend_url
        self._logger = logger
        self._username = username
        self._password = password
        self._use_tls = use_tls
        self._timeout = timeout

    async def send(
        self,
        to_email: str,
        template: EmailTemplate,
        parameters: dict[str, str],
    ) -> Result[None, DeliveryError]:
        """Render and deliver one message.

        Returns:
            Success(None) once the relay accepted the message, or
            Failure(DeliveryError) on any SMTP or socket error.
        """
        message = render_email(
            template,
            to_email,
            parameters,
            sender=self._sender,
            frontend_url=self._frontend_url,
        )
        try:
            await asyncio.to_thread(self._deliver, to_email, message)
        except (smtplib.SMTPException, OSError) as e:
            self._logger.error(
                "email_delivery_failed",
                error=e,
                backend="smtp",
                to_email=to_email,
                template=template.value,
            )
            return Failure(
                error=DeliveryError(
                    code=ErrorCode.EMAIL_FAILURE,
                    message="E-mail failure",
                    service_name="smtp",
                    details={"error": str(e)},
                )
            )

        self._logger.info(
            "email_sent", backend="smtp", to_email=to_email, template=template.value
        )
        return Success(value=None)

    def _deliver(self, to_email: str, message: MIMEMultipart) -> None:
        with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as server:
            server.ehlo()
            if self._use_tls:
                server.starttls()
                server.ehlo()
            if self._username:
                server.login(self._username, self._password or "")
            server.sendmail(self._sender, [to_email], message.as_string())
