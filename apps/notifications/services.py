"""Notification services for booking e-mails."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from django.conf import settings  # type: ignore
from django.core.mail import send_mail  # type: ignore

if TYPE_CHECKING:  # pragma: no cover
    from apps.bookings.models import BookingBase
    from apps.users.models import Profile

logger = logging.getLogger(__name__)


# ============================================================================
# EMAIL NOTIFICATIONS
# ============================================================================

def send_email_notification(recipient_email: str, subject: str, message: str) -> bool:
    """
    Send a plain-text e-mail.

    Returns:
        bool: True if the message was handed to the mail backend
    """
    if not recipient_email:
        logger.warning("Skipping e-mail '%s': recipient has no address", subject)
        return False

    try:
        send_mail(
            subject=subject,
            message=message,
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[recipient_email],
            fail_silently=False,
        )
    except Exception as e:
        logger.error("Failed to send email to %s: %s", recipient_email, e, exc_info=True)
        return False

    logger.info("Email sent to %s: %s", recipient_email, subject)
    return True


def _period(booking: "BookingBase") -> str:
    return f"{booking.starts} - {booking.ends}"


def _listing_title(booking: "BookingBase") -> str:
    return booking.listing.title if booking.listing else "a deleted listing"


def send_booking_requested_email(booking: "BookingBase") -> bool:
    """Tell the provider a farmer asked for their listing."""

    provider = booking.provider
    farmer = booking.farmer
    subject = f"New {booking.kind} booking request"
    message = (
        f"Hello {provider.full_name or provider.email},\n\n"
        f"{farmer.full_name or farmer.email} requested \"{_listing_title(booking)}\" "
        f"for {_period(booking)}.\n"
        f"Total: {booking.total_amount} {settings.AGROHIRE_CURRENCY}\n"
    )
    if booking.notes:
        message += f"Notes: {booking.notes}\n"
    message += "\nConfirm or cancel the request from your bookings page."
    return send_email_notification(provider.email, subject, message)


def send_booking_status_email(
    booking: "BookingBase",
    recipient: "Profile",
    previous_status: str,
) -> bool:
    """Tell the party that did not act that the booking changed status."""

    subject = f"Your {booking.kind} booking is now {booking.get_status_display().lower()}"
    message = (
        f"Hello {recipient.full_name or recipient.email},\n\n"
        f"The booking for \"{_listing_title(booking)}\" ({_period(booking)}) "
        f"moved from {previous_status} to {booking.status}.\n"
    )
    return send_email_notification(recipient.email, subject, message)
