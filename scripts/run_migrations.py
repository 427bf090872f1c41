#!/usr/bin/env python3
"""Upgrade the database schema, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3f2a9c41d7e0
    python scripts/run_migrations.py --sql      # print SQL instead of running it
"""

import argparse
import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from qna.config import Settings
from qna.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main() -> int:
    parser = argparse.ArgumentParser(description="Run Ask Board migrations")
    parser.add_argument("revision", nargs="?", default="head")
    parser.add_argument("--sql", action="store_true", help="offline mode, emit SQL")
    args = parser.parse_args()

    configure_logfire(Settings())

    config = Config(str(ALEMBIC_INI))
    with logfire.span("migrations.upgrade", revision=args.revision, sql=args.sql):
        try:
            command.upgrade(config, args.revision, sql=args.sql)
        except Exception as e:
            logfire.error(
                "Migration failed",
                revision=args.revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than start on a half-migrated schema
            raise

    logfire.info("Migrations applied", revision=args.revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
