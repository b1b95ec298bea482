"""Structured logging setup for applications embedding formguard."""

import logging
from typing import Optional

import structlog

from formguard.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Install the structlog processor chain.

    Console rendering in DEBUG mode, JSON lines otherwise. Events below
    ``LOG_LEVEL`` are dropped by the bound logger.

    Args:
        settings: Settings to read DEBUG / LOG_LEVEL from. Defaults to get_settings().
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )
