import logging
import smtplib, ssl
from email.message import EmailMessage
from email.utils import formataddr
from typing import NamedTuple, Optional

logger = logging.getLogger(__name__)


class SendResult(NamedTuple):
    ok: bool
    reason: Optional[str] = None


def send_email(settings, to, subject, html_body, from_name, text_body=None):
    """
    Send one HTML email over SMTP-SSL. Transport problems are reported in
    the returned SendResult rather than raised.
    """
    if not to:
        return SendResult(False, "no recipient address")

    ctx = ssl.create_default_context()
    try:
        # header values with CR/LF are rejected here as ValueError
        msg = EmailMessage()
        msg["From"] = formataddr((from_name, settings.email_address or ""))
        msg["To"] = to
        msg["Subject"] = subject
        msg.set_content(text_body or "This message is best viewed in an HTML-capable mail client.")
        msg.add_alternative(html_body, subtype="html")

        with smtplib.SMTP_SSL(settings.smtp_host, settings.smtp_port, context=ctx) as smtp:
            smtp.login(settings.email_address, settings.email_password)
            smtp.send_message(msg)
    except (smtplib.SMTPException, OSError, ValueError) as exc:
        logger.warning("Failed to send email to %s: %s", to, exc)
        return SendResult(False, str(exc))

    logger.info("Email sent successfully to: %s", to)
    return SendResult(True)


def smtp_sender(settings):
    """Bind settings so callers only pass message fields."""
    def send(to, subject, html_body, from_name, text_body=None):
        return send_email(settings, to, subject, html_body, from_name, text_body)
    return send
