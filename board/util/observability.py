"""Logfire configuration and instrumentation.

Services open a span per operation and emit structured events inside it::

    with logfire.span("comment_service.create_comment", post_id=str(post_id)):
        ...
        logfire.info("Comment created", comment_id=str(comment.id))

Ownership and moderation tokens travel in cookies; nothing here records
cookie values.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from board.config import ObservabilitySettings, Settings
from board.util.error import ConfigurationError

SERVICE_NAME = "board-api"
SERVICE_VERSION = "0.1.0"


def _send_to_logfire(observability: ObservabilitySettings) -> bool:
    """Explicit flag first, then token presence."""
    if observability.send_to_logfire is None:
        return bool(observability.logfire_token)
    if observability.send_to_logfire and not observability.logfire_token:
        raise ConfigurationError(
            "OBSERVABILITY__SEND_TO_LOGFIRE is set but no Logfire token is configured"
        )
    return observability.send_to_logfire


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for this process.

    Setting ``OBSERVABILITY__LOGFIRE_TOKEN`` turns on export to Logfire
    unless ``OBSERVABILITY__SEND_TO_LOGFIRE=false``; without a token events
    only go to the console.

    Args:
        settings: Application settings

    Raises:
        ConfigurationError: If sending is forced on without a token
    """
    send_to_logfire = _send_to_logfire(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        moderation_enabled=settings.moderation.enabled,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request, keeping cookie names but never their values."""

    def _map_request_attributes(request, attributes):
        result = {**attributes}
        if hasattr(request, "method"):
            result["method"] = request.method
        if hasattr(request, "url"):
            result["path"] = request.url.path
        if hasattr(request, "cookies"):
            result["cookie_names"] = sorted(request.cookies)
        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_map_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries issued through the async engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
