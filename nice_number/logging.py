"""Logging utilities for structured output."""

from __future__ import annotations

import logging
from typing import Any

import structlog


def configure_logging(level: str = "WARNING") -> None:
    """Configure structlog for JSON logs."""
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper(), logging.WARNING),
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=False),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> Any:
    # Always backed by a stdlib logger, so nothing is printed unless the
    # application enables it.
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
