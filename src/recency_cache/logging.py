"""Logging configuration utilities."""

from __future__ import annotations

import logging
import sys

import structlog

from .config import CacheSettings, get_settings


def configure_logging(settings: CacheSettings | None = None) -> None:
    """Configure stdlib logging and structlog for applications embedding the cache.

    Level and renderer come from ``settings`` (``get_settings()`` when omitted).
    The library never calls this itself; it only emits events through
    ``structlog.get_logger``.
    """
    if settings is None:
        settings = get_settings()

    log_level = getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(level=log_level, stream=sys.stderr, format="%(message)s")
    logging.getLogger().setLevel(log_level)

    renderer = (
        structlog.dev.ConsoleRenderer(colors=False)
        if settings.log_format == "console"
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=True,
    )
