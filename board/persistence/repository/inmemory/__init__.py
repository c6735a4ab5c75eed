"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .post import InMemoryPostRepository
from .tag import InMemoryTagRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryPostRepository",
    "InMemoryTagRepository",
]
