#!/usr/bin/env python3
"""Apply (or roll back) Alembic migrations against DATABASE__URL.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py -1 --down  # roll back one revision
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from chatter.config import Settings
from chatter.util.logging import setup_logging
from chatter.util.observability import configure_logfire


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("revision", nargs="?", default="head")
    parser.add_argument("--down", action="store_true", help="downgrade instead")
    args = parser.parse_args(argv)

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    alembic_cfg = Config("alembic.ini")
    direction = "downgrade" if args.down else "upgrade"

    with logfire.span("migrations", direction=direction, revision=args.revision):
        try:
            if args.down:
                command.downgrade(alembic_cfg, args.revision)
            else:
                command.upgrade(alembic_cfg, args.revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than start on a broken schema
            raise

    logfire.info("Database migrations completed", direction=direction)
    return 0


if __name__ == "__main__":
    sys.exit(main())
