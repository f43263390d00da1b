"""Render stored quotes into customer messages and hand them to the senders.

Rendering is plain text; delivery (or the log fallback) lives in
:mod:`app.utils.email` and :mod:`app.utils.sms`.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from ..core.config import settings
from ..models import CleaningQuoteRequest, RestorationQuoteRequest
from ..service_types.property_cleaning import MINIMUM_SERVICE_CHARGE
from ..utils.email import send_email
from ..utils.sms import send_sms

logger = logging.getLogger(__name__)


def _money(value: Any) -> str:
    return f"${Decimal(str(value)):,.2f}"


def _label(value: str) -> str:
    return value.replace("_", " ").title()


def _footer() -> str:
    return (
        f"This quote is valid for {settings.QUOTE_VALID_DAYS} days from the date of issue. "
        "Prices subject to change based on actual property conditions.\n\n"
        f"{settings.COMPANY_NAME}\n"
        f"{settings.COMPANY_LOCATION}\n"
        f"{settings.COMPANY_PHONE}\n"
        f"{settings.COMPANY_EMAIL}"
    )


def render_cleaning_quote_email(quote: CleaningQuoteRequest) -> tuple[str, str]:
    """Return ``(subject, body)`` for a property cleaning quote."""
    subject = f"Your Property Cleaning Quote #{quote.reference}"
    lines = [f"- {item['service']} - {_money(item['price'])}" for item in (quote.breakdown or [])]
    parts = [
        f"Hello {quote.customer_name},",
        "",
        f"Thank you for requesting a property cleaning quote from {settings.COMPANY_NAME}. "
        "Here is your estimate:",
        "",
        f"Property address: {quote.property_address}",
        "",
        "Selected services:",
        *lines,
        "",
    ]
    if quote.minimum_applied:
        parts += [
            f"Note: a minimum service charge of {_money(MINIMUM_SERVICE_CHARGE)} has been applied to this quote.",
            "",
        ]
    parts += [
        f"Total: {_money(quote.final_total)}",
        "",
        f"Call or text {settings.COMPANY_PHONE} to schedule.",
        "",
        _footer(),
    ]
    return subject, "\n".join(parts)


def render_restoration_quote_email(quote: RestorationQuoteRequest) -> tuple[str, str]:
    subject = f"Your Paver Restoration Quote #{quote.reference}"
    extras = []
    if quote.include_sealer:
        extras.append("sealer")
    if quote.include_polymeric_sand:
        extras.append("polymeric sand")
    parts = [
        f"Hello {quote.name},",
        "",
        f"Thank you for requesting a restoration quote from {settings.COMPANY_NAME}.",
        "",
        f"Project: {_label(quote.service_type)} ({_label(quote.surface_type)})",
        f"Area: {quote.length} ft x {quote.width} ft = {quote.square_footage} sq ft",
        f"Condition: {_label(quote.condition)}",
        f"Add-ons: {', '.join(extras) if extras else 'none'}",
        "",
        f"Basic Restoration - {_money(quote.basic_tier_price)}",
        f"Recommended Restoration (best value) - {_money(quote.recommended_tier_price)}",
        f"Premium Protection - {_money(quote.premium_tier_price)}",
        "",
        "Next steps:",
        "1. Choose your service tier",
        f"2. Call us at {settings.COMPANY_PHONE}",
        "3. We'll schedule your restoration",
        "",
        _footer(),
    ]
    return subject, "\n".join(parts)


def render_cleaning_quote_sms(quote: CleaningQuoteRequest) -> str:
    services = [
        name
        for name, selected in (
            ("Driveway", quote.driveway),
            ("Roof", quote.roof),
            ("Siding", quote.siding),
            ("Gutters", quote.gutters),
        )
        if selected
    ]
    if quote.fence_sides:
        services.append(f"Fence({quote.fence_sides})")
    return (
        f"{settings.COMPANY_NAME} Quote #{quote.reference}\n\n"
        f"Property: {quote.property_address}\n"
        f"Services: {', '.join(services)}\n\n"
        f"Total: {_money(quote.final_total)}\n\n"
        f"Call {settings.COMPANY_PHONE} to schedule\n"
        f"Valid {settings.QUOTE_VALID_DAYS} days"
    )


def render_restoration_quote_sms(quote: RestorationQuoteRequest) -> str:
    return (
        f"{settings.COMPANY_NAME} Quote #{quote.reference}\n\n"
        f"{quote.square_footage} sq ft restoration\n"
        f"Basic: {_money(quote.basic_tier_price)}\n"
        f"Recommended: {_money(quote.recommended_tier_price)}\n"
        f"Premium: {_money(quote.premium_tier_price)}\n\n"
        f"Call {settings.COMPANY_PHONE} to schedule\n"
        f"Valid {settings.QUOTE_VALID_DAYS} days"
    )


def render_internal_notice(quote: CleaningQuoteRequest | RestorationQuoteRequest) -> tuple[str, str]:
    """Short office-inbox summary of a newly stored quote request."""
    subject = f"New quote request #{quote.reference}"
    if isinstance(quote, CleaningQuoteRequest):
        lines = [
            "Property cleaning quote request",
            f"Customer: {quote.customer_name} ({quote.customer_email}, {quote.customer_phone})",
            f"Property: {quote.property_address}",
            "Services: " + ", ".join(item["service"] for item in (quote.breakdown or [])),
            f"Total: {_money(quote.final_total)}"
            + (" (minimum applied)" if quote.minimum_applied else ""),
        ]
        if quote.additional_notes:
            lines.append(f"Notes: {quote.additional_notes}")
    else:
        lines = [
            "Restoration quote request",
            f"Customer: {quote.name} ({quote.email}, {quote.phone})",
            f"Address: {quote.address}",
            f"Project: {_label(quote.service_type)}, {quote.square_footage} sq ft",
            f"Tiers: {_money(quote.basic_tier_price)} / {_money(quote.recommended_tier_price)}"
            f" / {_money(quote.premium_tier_price)}",
            f"Selected tier: {quote.selected_tier or 'not chosen'}",
        ]
    return subject, "\n".join(lines)


def email_quote(quote: CleaningQuoteRequest | RestorationQuoteRequest, recipient: str) -> tuple[bool, str]:
    if isinstance(quote, CleaningQuoteRequest):
        subject, body = render_cleaning_quote_email(quote)
    else:
        subject, body = render_restoration_quote_email(quote)
    return send_email(recipient, subject, body)


def sms_quote(quote: CleaningQuoteRequest | RestorationQuoteRequest, phone: str) -> tuple[bool, str]:
    if isinstance(quote, CleaningQuoteRequest):
        body = render_cleaning_quote_sms(quote)
    else:
        body = render_restoration_quote_sms(quote)
    return send_sms(phone, body)


def notify_new_quote_request(quote: CleaningQuoteRequest | RestorationQuoteRequest) -> None:
    """Email the customer their quote and send a short notice to the internal inbox if configured."""
    customer_email = quote.customer_email if isinstance(quote, CleaningQuoteRequest) else quote.email
    ok, message = email_quote(quote, customer_email)
    if not ok:
        logger.warning("Customer email for quote %s failed: %s", quote.id, message)
    if settings.QUOTE_NOTIFY_EMAIL:
        subject, body = render_internal_notice(quote)
        ok, message = send_email(settings.QUOTE_NOTIFY_EMAIL, subject, body)
        if not ok:
            logger.warning("Internal notice for quote %s failed: %s", quote.id, message)
