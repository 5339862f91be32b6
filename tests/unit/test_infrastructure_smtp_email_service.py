"""Unit tests for SmtpEmailService with a patched smtplib.SMTP."""

import smtplib
from unittest.mock import MagicMock, Mock, patch

import pytest

from src.core.enums import ErrorCode
from src.core.errors import DeliveryError
from src.core.result import Failure, Success
from src.domain.enums import EmailTemplate
from src.infrastructure.email import SmtpEmailService

SMTP_PATH = "src.infrastructure.email.smtp_email_service.smtplib.SMTP"


def make_service(**overrides):
    options = {
        "host": "smtp.example.com",
        "port": 587,
        "sender": "My App <info@my-app.com>",
        "frontend_url": "http://localhost:8080",
        "logger": Mock(),
    }
    options.update(overrides)
    return SmtpEmailService(**options)


@pytest.fixture
def smtp_server():
    with patch(SMTP_PATH) as smtp_cls:
        server = MagicMock()
        smtp_cls.return_value.__enter__.return_value = server
        yield smtp_cls, server


@pytest.mark.unit
class TestSmtpEmailService:
    """Test delivery and error mapping."""

    async def test_delivers_message_with_token(self, smtp_server):
        smtp_cls, server = smtp_server
        service = make_service()

        result = await service.send(
            "user1@mail.com", EmailTemplate.PASSWORD_RESET, {"token": "abc123"}
        )

        assert result == Success(value=None)
        smtp_cls.assert_called_once_with("smtp.example.com", 587, timeout=10.0)
        sender, recipients, raw = server.sendmail.call_args.args
        assert sender == "My App <info@my-app.com>"
        assert recipients == ["user1@mail.com"]
        assert "user1@mail.com" in raw
        assert "abc123" in raw

    async def test_tls_and_login_when_configured(self, smtp_server):
        _, server = smtp_server
        service = make_service(username="mailer", password="secret", use_tls=True)

        await service.send("user1@mail.com", EmailTemplate.PASSWORD_RESET, {"token": "t"})

        server.starttls.assert_called_once()
        server.login.assert_called_once_with("mailer", "secret")

    async def test_no_tls_or_login_by_default(self, smtp_server):
        _, server = smtp_server

        await make_service().send(
            "user1@mail.com", EmailTemplate.PASSWORD_RESET, {"token": "t"}
        )

        server.starttls.assert_not_called()
        server.login.assert_not_called()

    @pytest.mark.parametrize(
        "error",
        [
            smtplib.SMTPRecipientsRefused({"user1@mail.com": (550, b"no such user")}),
            smtplib.SMTPServerDisconnected("gone"),
            ConnectionRefusedError("refused"),
            TimeoutError("timed out"),
        ],
    )
    async def test_transport_errors_become_delivery_error(self, smtp_server, error):
        _, server = smtp_server
        server.sendmail.side_effect = error
        logger = Mock()

        result = await make_service(logger=logger).send(
            "user1@mail.com", EmailTemplate.PASSWORD_RESET, {"token": "t"}
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, DeliveryError)
        assert result.error.code == ErrorCode.EMAIL_FAILURE
        assert result.error.service_name == "smtp"
        logger.error.assert_called_once()

    async def test_connection_failure_becomes_delivery_error(self):
        with patch(SMTP_PATH, side_effect=ConnectionRefusedError("refused")):
            result = await make_service().send(
                "user1@mail.com", EmailTemplate.PASSWORD_RESET, {"token": "t"}
            )

        assert isinstance(result, Failure)
