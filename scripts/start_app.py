#!/usr/bin/env python3
"""Serve the board API under uvicorn.

Logging and Logfire are configured before the app module is imported so
failures while building the app are reported too.
"""

import sys
import logfire
import uvicorn

from board.config import Settings
from board.util.logging import setup_logging
from board.util.observability import configure_logfire

APP_PATH = "board.interface.api.app:app"


def main() -> int:
    """Run the API server until it exits."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    if settings.environment == "production" and not settings.cookies.secure:
        logfire.warn("Cookies are not marked secure in production")

    try:
        with logfire.span("start_app", environment=settings.environment):
            logfire.info(
                "Starting board API",
                app=APP_PATH,
                moderation_enabled=settings.moderation.enabled,
            )
            # Importing the app module builds the DI container
            uvicorn.run(
                APP_PATH,
                host="0.0.0.0",
                port=8000,
                log_level="debug" if settings.debug else "info",
                # Secure cookies depend on the scheme seen behind the proxy
                proxy_headers=True,
            )
        return 0

    except Exception as e:
        logfire.error(
            "Board API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
