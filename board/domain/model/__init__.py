"""Domain model entities for the board."""

from board.domain.model.comment import Comment
from board.domain.model.post import Post
from board.domain.model.tag import Tag

__all__ = [
    "Post",
    "Comment",
    "Tag",
]
