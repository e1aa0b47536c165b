"""Standard library logging setup.

Application events go through logfire; this only tunes the stdlib loggers
that uvicorn, SQLAlchemy, alembic and asyncpg write to.
"""

import logging
import sys

from chatter.config import Settings

# Loggers that are too chatty below WARNING outside debug runs
_NOISY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "uvicorn.access", "asyncio")


def log_level(settings: Settings) -> int:
    """DEBUG in debug mode, WARNING under test, INFO otherwise."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure root logging for the process."""
    level = log_level(settings)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    if not settings.debug:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("alembic").setLevel(max(level, logging.INFO))
    logging.getLogger(__name__).debug(
        "Logging configured at %s", logging.getLevelName(level)
    )
