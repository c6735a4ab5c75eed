"""PostgreSQL repository implementations."""

from board.persistence.repository.comment import PostgresCommentRepository
from board.persistence.repository.post import PostgresPostRepository
from board.persistence.repository.tag import PostgresTagRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresPostRepository",
    "PostgresTagRepository",
]
