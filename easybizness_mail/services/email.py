"""Approval notification email.

Validates the request, renders both bodies and hands a single message to the
mail transport. Nothing is retried or deduplicated: every call that passes
validation results in exactly one send attempt.
"""
import datetime as dt
import logging

from easybizness_mail.core.errors import ValidationError
from easybizness_mail.schemas.notification import ApprovalNotificationIn
from easybizness_mail.services.mail_transport import Address, MailTransport, OutgoingMessage
from easybizness_mail.services.templates import (
    approval_subject,
    greeting_name,
    render_approval_email,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "toEmail and shopName are required"


def build_dashboard_url(scheme: str, host: str) -> str:
    return f"{scheme}://{host}/dashboard"


async def send_approval_email(
    payload: ApprovalNotificationIn | None,
    *,
    dashboard_url: str,
    sender: Address,
    transport: MailTransport,
    now: dt.datetime | None = None,
) -> OutgoingMessage:
    """Send the "business approved" email to the shop owner.

    Args:
        payload: Parsed request body; None is treated as an empty body.
        dashboard_url: Call-to-action link embedded in both bodies.
        sender: Envelope sender (the configured default).
        transport: Mail transport used for delivery.
        now: Approval timestamp; defaults to the current local time.

    Raises:
        ValidationError: toEmail or shopName is missing or empty.
        DeliveryError: the transport could not deliver the message.
    """
    payload = payload or ApprovalNotificationIn()
    if not payload.to_email or not payload.shop_name:
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)

    rendered = render_approval_email(
        greeting_name=greeting_name(payload.to_name),
        shop_name=payload.shop_name,
        dashboard_url=dashboard_url,
        approved_at=now or dt.datetime.now(),
    )
    message = OutgoingMessage(
        sender=sender,
        recipients=[Address(payload.to_email, payload.to_name or "")],
        subject=approval_subject(payload.shop_name),
        text=rendered.text,
        html=rendered.html,
    )
    await transport.send(message)
    logger.info("Approval email dispatched for shop %r", payload.shop_name)
    return message
