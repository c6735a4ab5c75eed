"""Repository interfaces.

Services depend on these; ``board.persistence`` provides PostgreSQL and
in-memory implementations.
"""

from board.domain.repository.comment import CommentRepository
from board.domain.repository.post import PostRepository, PostSortOrder
from board.domain.repository.tag import TagRepository

__all__ = [
    "CommentRepository",
    "PostRepository",
    "PostSortOrder",
    "TagRepository",
]
