"""Centralized structlog configuration.

Call ``configure_logging`` once at process start; modules then obtain loggers
with ``structlog.get_logger(__name__)`` and log events with key/value context.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(level: str = "INFO", format_json: bool = False) -> None:
    """Configure stdlib logging and structlog for the whole application.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        format_json: Render JSON lines instead of human-readable console output.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    processors: list = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Loggers must pick up later configure() calls (lifespan, capture_logs).
        cache_logger_on_first_use=False,
    )
