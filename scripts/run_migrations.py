#!/usr/bin/env python3
"""Upgrade the board schema to the latest Alembic revision."""

import sys
import logfire
from alembic import command
from alembic.config import Config
from alembic.script import ScriptDirectory

from board.config import Settings
from board.util.logging import setup_logging
from board.util.observability import configure_logfire


def main() -> int:
    """Apply pending migrations; a failure aborts the deploy."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    alembic_cfg = Config("alembic.ini")
    head = ScriptDirectory.from_config(alembic_cfg).get_current_head()

    try:
        with logfire.span("run_migrations", target=head):
            command.upgrade(alembic_cfg, "head")
        logfire.info("Schema is at head", revision=head)
        return 0

    except Exception as e:
        logfire.error(
            "Schema upgrade failed",
            target=head,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # The app must not start against a half-migrated schema
        raise


if __name__ == "__main__":
    sys.exit(main())
