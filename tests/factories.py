"""Builders for domain objects used across tests."""

from datetime import datetime, timedelta
from uuid import uuid4

from board.domain.model import Comment, Post
from board.domain.value import (
    CommentId,
    OwnershipToken,
    PostId,
    ReactionCounts,
    Slug,
    TagName,
)


def make_post(
    title: str = "A hard week at work",
    content: str = "It has been a long week and I wanted to share a few thoughts.",
    slug: str | None = None,
    token: str | None = "post-owner-token",
    tags: tuple[str, ...] = (),
    reactions: ReactionCounts | None = None,
    published_at: datetime | None = None,
) -> Post:
    """Build a post for repository-level tests."""
    now = published_at or datetime.now()
    return Post(
        id=PostId(uuid4()),
        slug=Slug(slug or f"post-{uuid4().hex[:8]}"),
        title=title,
        content=content,
        excerpt=content[:180],
        author_token=OwnershipToken(token) if token else None,
        tag_names=[TagName(tag) for tag in tags],
        reactions=reactions or ReactionCounts(),
        published_at=now,
        created_at=now,
        updated_at=now,
    )


def make_comment(
    post_id: PostId,
    content: str = "Thank you for sharing this.",
    parent_id: CommentId | None = None,
    token: str | None = "comment-owner-token",
    created_at: datetime | None = None,
    edited_after: timedelta = timedelta(0),
    reactions: ReactionCounts | None = None,
    author_alias: str | None = None,
) -> Comment:
    """Build a comment; ``edited_after`` sets the gap to ``updated_at``."""
    created = created_at or datetime.now()
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id,
        parent_id=parent_id,
        content=content,
        author_alias=author_alias,
        author_token=OwnershipToken(token) if token else None,
        reactions=reactions or ReactionCounts(),
        created_at=created,
        updated_at=created + edited_after,
    )
