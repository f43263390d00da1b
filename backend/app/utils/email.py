import asyncio
import logging
from email.message import EmailMessage

import aiosmtplib

from ..core.config import settings

logger = logging.getLogger(__name__)


async def _send_async(msg: EmailMessage) -> None:
    await aiosmtplib.send(
        msg,
        hostname=settings.SMTP_HOST,
        port=settings.SMTP_PORT,
        username=settings.SMTP_USERNAME or None,
        password=settings.SMTP_PASSWORD or None,
        start_tls=bool(settings.SMTP_USERNAME),
    )


def build_message(recipient: str, subject: str, body: str) -> EmailMessage:
    msg = EmailMessage()
    msg["From"] = settings.SMTP_FROM
    msg["To"] = recipient
    msg["Subject"] = subject
    msg.set_content(body)
    return msg


def send_email(recipient: str, subject: str, body: str) -> tuple[bool, str]:
    """Send an email via SMTP, or log it when SMTP is not configured.

    Returns ``(success, message)``; delivery failures are logged, not raised.
    """
    if settings.EMAIL_DEV_MODE or not settings.smtp_configured:
        logger.info(
            "Email (not delivered) to=%s subject=%s\n%s",
            recipient,
            subject,
            body,
        )
        return True, "Email logged (SMTP not configured)"

    msg = build_message(recipient, subject, body)
    try:
        asyncio.run(_send_async(msg))
    except Exception as exc:  # network and SMTP protocol errors
        logger.error("Failed to send email to %s: %s", recipient, exc)
        return False, f"Failed to send email: {exc}"
    logger.info("Sent email to %s", recipient)
    return True, "Email sent"
