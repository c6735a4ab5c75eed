"""Standard library logging setup.

Application code logs through ``logfire``; this configures the stdlib loggers
used by uvicorn, SQLAlchemy, asyncpg and alembic so their records reach
stdout and Logfire as well.
"""

import logging
import sys

import logfire

from board.config import Settings

# Chatty third-party loggers, capped regardless of environment
QUIET_LOGGERS = ("sqlalchemy.engine", "uvicorn.access", "asyncpg")

LEVELS = {
    "test": logging.WARNING,
    "development": logging.INFO,
    "staging": logging.INFO,
    "production": logging.INFO,
}


def setup_logging(settings: Settings) -> None:
    """Configure root logging for the current environment.

    Debug mode lowers everything to DEBUG except the quiet loggers.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else LEVELS[settings.environment]

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logfire.LogfireLoggingHandler(),
        ],
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
