"""Run the HSA roster web server.

Usage:
    python -m hsaroster
"""

from __future__ import annotations

import sys

import structlog
import uvicorn

from hsaroster.api.app import create_app
from hsaroster.core.config import load_settings
from hsaroster.core.exceptions import ConfigurationError
from hsaroster.core.logging import configure_logging


def main() -> int:
    configure_logging()
    logger = structlog.get_logger("hsaroster")

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        logger.error("startup_configuration_invalid", error=str(exc))
        return 1

    configure_logging(settings.log_level, settings.log_json)
    logger.info(
        "server_starting",
        host=settings.server.host,
        port=settings.server.port,
        environment=settings.environment,
    )
    uvicorn.run(
        create_app(settings),
        host=settings.server.host,
        port=settings.server.port,
        log_config=None,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
