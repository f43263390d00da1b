import logging
import re

from twilio.base.exceptions import TwilioException
from twilio.rest import Client

from ..core.config import settings

logger = logging.getLogger(__name__)


def normalize_phone(phone: str) -> str:
    """Return an E.164-style number, assuming US (+1) when no country code is given."""
    phone = (phone or "").strip()
    if phone.startswith("+"):
        return "+" + re.sub(r"\D", "", phone)
    return "+1" + re.sub(r"\D", "", phone)


def send_sms(phone: str, body: str) -> tuple[bool, str]:
    """Send an SMS through Twilio, or log it when Twilio is not configured."""
    to = normalize_phone(phone)
    if not settings.sms_configured:
        logger.info("SMS (not delivered) to=%s\n%s", to, body)
        return True, "SMS logged (Twilio not configured)"
    try:
        Client(settings.TWILIO_ACCOUNT_SID, settings.TWILIO_AUTH_TOKEN).messages.create(
            body=body, from_=settings.TWILIO_FROM_NUMBER, to=to
        )
    except TwilioException as exc:
        logger.error("Failed to send SMS to %s: %s", to, exc)
        return False, f"Failed to send SMS: {exc}"
    logger.info("Sent SMS to %s", to)
    return True, "SMS sent"
