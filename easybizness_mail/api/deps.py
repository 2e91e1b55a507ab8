from fastapi import Request

from easybizness_mail.core.config import Settings
from easybizness_mail.services.mail_transport import MailTransport


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_transport(request: Request) -> MailTransport:
    """The transport built at startup (or injected by create_app)."""
    return request.app.state.transport
