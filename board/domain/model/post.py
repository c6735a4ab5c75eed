"""Post aggregate root.

Posts are anonymous Markdown messages that open a conversation.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import OwnershipToken, PostId, ReactionCounts, Slug, TagName


class Post(DomainModel):
    """Post aggregate root.

    Ownership is proven by presenting ``author_token``; the alias is only a
    display label.
    """

    id: PostId
    slug: Slug
    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1)
    excerpt: str = ""
    author_alias: Optional[str] = Field(default=None, max_length=40)
    author_token: Optional[OwnershipToken] = None
    tag_names: list[TagName] = Field(default_factory=list)
    reactions: ReactionCounts = Field(default_factory=ReactionCounts)
    published_at: datetime = Field(default_factory=datetime.now)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
