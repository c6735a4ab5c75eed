"""Comment entity.

Comments are threaded replies on a post. Each stores only its direct
parent; the thread shape is rebuilt at read time by the comment tree
engine.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import CommentId, OwnershipToken, PostId, ReactionCounts


class Comment(DomainModel):
    """Comment entity.

    ``id`` and ``parent_id`` never change after creation. ``updated_at`` only
    moves when the owner edits content or alias.
    """

    id: CommentId
    post_id: PostId
    parent_id: Optional[CommentId] = None
    content: str = Field(min_length=1)
    author_alias: Optional[str] = Field(default=None, max_length=40)
    author_token: Optional[OwnershipToken] = None
    reactions: ReactionCounts = Field(default_factory=ReactionCounts)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
