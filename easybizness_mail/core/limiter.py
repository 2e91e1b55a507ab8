"""Rate limiter singleton, shared by the app factory and the routers.

Limiting is opt-in (RATE_LIMIT_ENABLED). ``configure_limiter`` applies the
settings handed to ``create_app``; the per-route limit is read at request time.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from easybizness_mail.core.config import Settings, settings as default_settings

limiter = Limiter(key_func=get_remote_address, enabled=default_settings.RATE_LIMIT_ENABLED)

_send_approval_limit = default_settings.SEND_APPROVAL_RATE_LIMIT


def configure_limiter(settings: Settings) -> Limiter:
    global _send_approval_limit
    limiter.enabled = settings.RATE_LIMIT_ENABLED
    _send_approval_limit = settings.SEND_APPROVAL_RATE_LIMIT
    return limiter


def send_approval_limit() -> str:
    return _send_approval_limit
