"""Async engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from board.config import Settings

APPLICATION_NAME = "board-api"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg engine described by ``settings.database``.

    SQL is echoed in debug mode. Connections report ``board-api`` as their
    application name so they are easy to spot in ``pg_stat_activity``.
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        connect_args={"server_settings": {"application_name": APPLICATION_NAME}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the per-request session factory.

    Repositories flush explicitly and the request scope commits, so neither
    autoflush nor expiry on commit is wanted.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
