"""In-memory persistence for the test container."""

from dishka import Scope, provide

from board.domain.repository import CommentRepository, PostRepository, TagRepository
from board.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryPostRepository,
    InMemoryTagRepository,
)
from board.util.di import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Dict-backed repositories.

    APP scope keeps data across requests made against one container (for
    example several TestClient calls); each test builds its own container.
    """

    __is_mock__ = True

    post_repository = provide(
        InMemoryPostRepository, provides=PostRepository, scope=Scope.APP
    )
    comment_repository = provide(
        InMemoryCommentRepository, provides=CommentRepository, scope=Scope.APP
    )
    tag_repository = provide(
        InMemoryTagRepository, provides=TagRepository, scope=Scope.APP
    )
