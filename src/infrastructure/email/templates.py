"""Rendering of outgoing email messages.

Bodies are kept ASCII so MIMEText picks 7bit transfer encoding: the raw
message then contains the recipient address and the token verbatim, which
is what mail-based tests and support staff grep for.
"""

from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from src.domain.enums import EmailTemplate


def _password_reset(
    to_email: str, parameters: dict[str, str], frontend_url: str
) -> tuple[str, str, str]:
    token = parameters["token"]
    reset_link = f"{frontend_url}/#/password-reset?reset={token}"

    subject = "Password Reset"
    text_body = (
        "Password Reset\n\n"
        f"A password reset was requested for {to_email}.\n"
        f"Open the link below to choose a new password:\n{reset_link}\n\n"
        f"Reset token: {token}\n\n"
        "If you did not request this, you can ignore this email."
    )
    html_body = (
        "<h1>Password Reset</h1>"
        f"<p>A password reset was requested for {to_email}.</p>"
        f'<p><a href="{reset_link}">Reset</a></p>'
    )
    return subject, text_body, html_body


_RENDERERS = {
    EmailTemplate.PASSWORD_RESET: _password_reset,
}


def render_email(
    template: EmailTemplate,
    to_email: str,
    parameters: dict[str, str],
    *,
    sender: str,
    frontend_url: str,
) -> MIMEMultipart:
    """Build the multipart (plain text + HTML) message for ``template``.

    Raises:
        KeyError: If a required template parameter is missing.
    """
    subject, text_body, html_body = _RENDERERS[template](to_email, parameters, frontend_url)

    msg = MIMEMultipart("alternative")
    msg["Subject"] = subject
    msg["From"] = sender
    msg["To"] = to_email

    msg.attach(MIMEText(text_body, "plain"))
    msg.attach(MIMEText(html_body, "html"))
    return msg
