"""Structured JSON logging configuration."""
import logging
import sys
from pythonjsonlogger import jsonlogger

from easybizness_mail.core.config import Settings, settings as default_settings
from easybizness_mail.middleware.request_id import RequestIdLogFilter


def setup_logging(settings: Settings | None = None) -> None:
    """Configure JSON structured logging for production, human-readable for dev."""
    settings = settings or default_settings
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdLogFilter())
    if settings.APP_ENV == "production":
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(request_id)s %(message)s",
            rename_fields={"asctime": "timestamp", "levelname": "level"},
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s %(name)s %(levelname)s [%(request_id)s] %(message)s",
        )
    handler.setFormatter(formatter)
    logging.root.handlers = [handler]
    logging.root.setLevel(level)
