"""Domain value objects for the board."""

from board.domain.value.identifiers import CommentId, PostId, TagId
from board.domain.value.types import (
    CommentSortOrder,
    OwnershipToken,
    ReactionCounts,
    ReactionKind,
    Slug,
    TagName,
)
from board.domain.value.viewer import ANONYMOUS, Viewer

__all__ = [
    # Identifiers
    "PostId",
    "CommentId",
    "TagId",
    # Types
    "CommentSortOrder",
    "OwnershipToken",
    "ReactionCounts",
    "ReactionKind",
    "Slug",
    "TagName",
    # Viewer context
    "ANONYMOUS",
    "Viewer",
]
