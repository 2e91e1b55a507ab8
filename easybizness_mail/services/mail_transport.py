"""Outbound mail delivery.

``MailTransport`` is the capability the notification service depends on.
``SmtpTransport`` relays through the configured SMTP provider (Mailtrap by
default); ``ConsoleTransport`` only logs the envelope and is used when
MAIL_ENABLED=False.
"""
import logging
import re
from dataclasses import dataclass, field
from email.message import EmailMessage
from email.utils import formataddr, formatdate, make_msgid
from typing import Protocol

import aiosmtplib

from easybizness_mail.core.config import Settings
from easybizness_mail.core.errors import DeliveryError

logger = logging.getLogger(__name__)

IMPLICIT_TLS_PORT = 465

_LINE_BREAKS = re.compile(r"[\r\n]+")


def header_safe(value: str) -> str:
    """Collapse CR/LF runs into a single space so the value fits on one header line."""
    return _LINE_BREAKS.sub(" ", value)


@dataclass(frozen=True)
class Address:
    email: str
    name: str = ""

    def formatted(self) -> str:
        name = header_safe(self.name)
        return formataddr((name, self.email)) if name else self.email


@dataclass(frozen=True)
class OutgoingMessage:
    sender: Address
    recipients: list[Address]
    subject: str
    text: str
    html: str

    def to_email_message(self) -> EmailMessage:
        """Build a multipart/alternative message (text first, HTML preferred)."""
        msg = EmailMessage()
        msg["From"] = self.sender.formatted()
        msg["To"] = ", ".join(r.formatted() for r in self.recipients)
        msg["Subject"] = header_safe(self.subject)
        msg["Date"] = formatdate(localtime=True)
        msg["Message-ID"] = make_msgid(domain=self.sender.email.rpartition("@")[2] or None)
        msg.set_content(self.text)
        msg.add_alternative(self.html, subtype="html")
        return msg


@dataclass(frozen=True)
class SmtpConfig:
    host: str
    port: int
    username: str | None = None
    password: str | None = field(default=None, repr=False)
    from_email: str = "no-reply@example.com"
    from_name: str = "EasyBizness"

    @classmethod
    def from_settings(cls, settings: Settings) -> "SmtpConfig":
        return cls(
            host=settings.MAILTRAP_HOST,
            port=settings.MAILTRAP_PORT,
            username=settings.MAILTRAP_USER,
            password=settings.MAILTRAP_PASS,
            from_email=settings.MAILTRAP_FROM_EMAIL,
            from_name=settings.MAILTRAP_FROM_NAME,
        )

    @property
    def default_sender(self) -> Address:
        return Address(self.from_email, self.from_name)


class MailTransport(Protocol):
    async def send(self, message: OutgoingMessage) -> None:
        """Deliver ``message`` or raise DeliveryError."""


class SmtpTransport:
    """One SMTP session per send; no pooling, no retries."""

    def __init__(self, config: SmtpConfig):
        self.config = config

    async def send(self, message: OutgoingMessage) -> None:
        try:
            email = message.to_email_message()
            smtp = aiosmtplib.SMTP(
                hostname=self.config.host,
                port=self.config.port,
                use_tls=self.config.port == IMPLICIT_TLS_PORT,
            )
            async with smtp:
                if self.config.username:
                    await smtp.login(self.config.username, self.config.password or "")
                await smtp.send_message(email)
        except (aiosmtplib.SMTPException, OSError, ValueError) as exc:
            raise DeliveryError(
                f"SMTP delivery via {self.config.host}:{self.config.port} failed: {exc}"
            ) from exc

        logger.info(
            "Email sent: subject=%r to=%s message_id=%s",
            message.subject,
            [r.email for r in message.recipients],
            email["Message-ID"],
        )


class ConsoleTransport:
    """Log-only transport for local development."""

    async def send(self, message: OutgoingMessage) -> None:
        try:
            email = message.to_email_message()
        except ValueError as exc:
            raise DeliveryError(f"Could not compose message: {exc}") from exc
        logger.info(
            "\n"
            "=== EMAIL (MAIL_ENABLED=False, not sent) ===\n"
            "From: %s\n"
            "To: %s\n"
            "Subject: %s\n"
            "%s\n"
            "============================================",
            email["From"],
            email["To"],
            email["Subject"],
            message.text,
        )


def build_transport(settings: Settings) -> MailTransport:
    if not settings.MAIL_ENABLED:
        logger.warning("MAIL_ENABLED=False: emails will be logged, not sent")
        return ConsoleTransport()
    if not settings.MAILTRAP_USER:
        logger.warning("MAILTRAP_USER is not set; SMTP login will be skipped")
    return SmtpTransport(SmtpConfig.from_settings(settings))
