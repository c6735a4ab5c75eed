"""Persistence providers.

Persistence is the one mockable component: tests swap in in-memory
repositories by subclassing :class:`PersistenceProvider` with
``__is_mock__ = True``.
"""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from board.config import Settings
from board.domain.repository import CommentRepository, PostRepository, TagRepository
from board.persistence.database import create_engine, create_session_factory
from board.persistence.repository import (
    PostgresCommentRepository,
    PostgresPostRepository,
    PostgresTagRepository,
)
from board.util.di.base import ProviderBase
from board.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL repositories sharing one session per request."""

    __is_mock__ = False

    post_repository = provide(
        PostgresPostRepository, provides=PostRepository, scope=Scope.REQUEST
    )
    comment_repository = provide(
        PostgresCommentRepository, provides=CommentRepository, scope=Scope.REQUEST
    )
    tag_repository = provide(
        PostgresTagRepository, provides=TagRepository, scope=Scope.REQUEST
    )

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide the engine; its pool is released when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()
        logfire.info("Database engine disposed")

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One transaction per request.

        Commits when the request finishes cleanly. Any exception raised while
        the request scope is open rolls everything back, so a failed post
        creation never leaves orphaned tags behind.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Request transaction rolled back", error=str(e))
                await session.rollback()
                raise
            else:
                await session.commit()
                logfire.debug("Request transaction committed")
