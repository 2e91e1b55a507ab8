"""Unit tests for the approval notification service."""
import datetime as dt
from unittest.mock import AsyncMock

import pytest

from easybizness_mail.core.errors import DeliveryError, ValidationError
from easybizness_mail.schemas.notification import ApprovalNotificationIn
from easybizness_mail.services.email import build_dashboard_url, send_approval_email
from easybizness_mail.services.mail_transport import Address

SENDER = Address("no-reply@example.com", "EasyBizness")
DASHBOARD = "https://shop.example.com/dashboard"
NOW = dt.datetime(2026, 10, 18, 15, 4, 5)


def _payload(**fields) -> ApprovalNotificationIn:
    return ApprovalNotificationIn.model_validate(fields)


def test_build_dashboard_url():
    assert build_dashboard_url("http", "localhost:5174") == "http://localhost:5174/dashboard"
    assert build_dashboard_url("https", "shop.example.com") == DASHBOARD


@pytest.mark.asyncio
async def test_sends_single_message():
    transport = AsyncMock()

    message = await send_approval_email(
        _payload(toEmail="a@b.com", toName="Jane", shopName="Acme"),
        dashboard_url=DASHBOARD,
        sender=SENDER,
        transport=transport,
        now=NOW,
    )

    transport.send.assert_awaited_once_with(message)
    assert message.sender == SENDER
    assert message.recipients == [Address("a@b.com", "Jane")]
    assert message.subject == 'Your business "Acme" has been approved'
    assert "Approved on 10/18/2026, 3:04:05 PM" in message.text
    assert DASHBOARD in message.html


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        None,
        ApprovalNotificationIn(),
        ApprovalNotificationIn(to_email="a@b.com"),
        ApprovalNotificationIn(shop_name="Acme"),
        ApprovalNotificationIn(to_email="a@b.com", shop_name=""),
    ],
)
async def test_validation_happens_before_sending(payload):
    transport = AsyncMock()

    with pytest.raises(ValidationError, match="toEmail and shopName are required"):
        await send_approval_email(payload, dashboard_url=DASHBOARD, sender=SENDER, transport=transport)

    transport.send.assert_not_awaited()


@pytest.mark.asyncio
async def test_delivery_error_propagates():
    transport = AsyncMock()
    transport.send.side_effect = DeliveryError("connection refused")

    with pytest.raises(DeliveryError):
        await send_approval_email(
            _payload(toEmail="a@b.com", shopName="Acme"),
            dashboard_url=DASHBOARD,
            sender=SENDER,
            transport=transport,
        )


@pytest.mark.asyncio
async def test_schema_accepts_snake_case_names():
    transport = AsyncMock()
    payload = ApprovalNotificationIn(to_email="a@b.com", to_name=" ", shop_name="Acme")

    message = await send_approval_email(
        payload, dashboard_url=DASHBOARD, sender=SENDER, transport=transport, now=NOW
    )

    assert message.text.startswith("Hi there,")
    assert message.recipients == [Address("a@b.com", " ")]
