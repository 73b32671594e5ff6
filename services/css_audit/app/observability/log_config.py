"""structlog configuration for the CSS audit service."""
from __future__ import annotations

import logging

import structlog

from ..config import get_settings


def configure_logging() -> None:
    settings = get_settings()
    level = logging.getLevelName(settings.observability.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )


__all__ = ["configure_logging"]
