"""FastAPI application for the board."""

from dishka import AsyncContainer
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from board.config import Settings
from board.domain.error import DomainError
from board.interface.api.routes import (
    comments,
    health,
    moderation,
    posts,
    reactions,
    tags,
)
from board.interface.error import to_http_exception
from board.util.di.container import create_container, setup_di
from board.util.observability import SERVICE_VERSION, instrument_fastapi

ROUTERS = (
    health.router,
    posts.router,
    comments.router,
    reactions.router,
    moderation.router,
    tags.router,
)


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Translate a domain error that a route did not map itself."""
    http_error = to_http_exception(exc)
    return JSONResponse(
        status_code=http_error.status_code, content={"detail": http_error.detail}
    )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Build the application around a DI container.

    Logfire has to be configured first: ``scripts/start_app.py`` does it in
    production and ``tests/conftest.py`` under pytest.

    Args:
        container: Container to serve from; defaults to the production one
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Board API",
        description="Anonymous support board with reactions and threaded replies",
        version=SERVICE_VERSION,
    )
    instrument_fastapi(app_instance)

    # Ownership cookies need credentialed CORS, so origins must be explicit
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.add_exception_handler(DomainError, domain_error_handler)
    for router in ROUTERS:
        app_instance.include_router(router)

    return app_instance


# Imported by uvicorn ("board.interface.api.app:app") after logging is set up
app = create_app()
