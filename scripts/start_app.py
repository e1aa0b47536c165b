#!/usr/bin/env python3
"""Serve the API with uvicorn after configuring logging and Logfire."""

import sys

import logfire
import uvicorn

from chatter.config import Settings
from chatter.util.logging import setup_logging
from chatter.util.observability import configure_logfire

APP_FACTORY = "chatter.interface.api.app:create_app"


def main() -> int:
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting API",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
    )
    try:
        uvicorn.run(
            APP_FACTORY,
            factory=True,
            host=settings.host,
            port=settings.port,
            reload=settings.environment == "development" and settings.debug,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "API startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
