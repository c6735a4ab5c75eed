"""Response items and helpers shared by use cases."""

from collections.abc import Iterable
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from board.domain.error import NotFoundError
from board.domain.model.post import Post
from board.domain.value import CommentId, ReactionCounts, ReactionKind
from board.util.markdown import render_markdown


class ReactionSummary(BaseModel):
    """Reaction counters plus the viewer's own reactions."""

    counts: dict[ReactionKind, int]
    total: int
    viewer_reactions: list[ReactionKind]

    @classmethod
    def build(
        cls, counts: ReactionCounts, viewer_reactions: Iterable[ReactionKind]
    ) -> "ReactionSummary":
        chosen = set(viewer_reactions)
        return cls(
            counts=counts.as_dict(),
            total=counts.total,
            # Declaration order keeps responses stable
            viewer_reactions=[kind for kind in ReactionKind if kind in chosen],
        )


class PostListItem(BaseModel):
    """Post as shown in listings."""

    post_id: str
    slug: str
    title: str
    excerpt: str
    author_alias: str | None
    tag_names: list[str]
    reactions: ReactionSummary
    comment_count: int
    published_at: datetime

    @classmethod
    def build(
        cls,
        post: Post,
        comment_count: int,
        viewer_reactions: Iterable[ReactionKind] = (),
    ) -> "PostListItem":
        return cls(
            post_id=str(post.id),
            slug=str(post.slug),
            title=post.title,
            excerpt=post.excerpt,
            author_alias=post.author_alias,
            tag_names=[tag.root for tag in post.tag_names],
            reactions=ReactionSummary.build(post.reactions, viewer_reactions),
            comment_count=comment_count,
            published_at=post.published_at,
        )


class PostDetail(PostListItem):
    """Full post as shown on its own page."""

    content: str
    content_html: str
    created_at: datetime
    updated_at: datetime
    can_edit: bool
    can_moderate: bool

    @classmethod
    def build_detail(
        cls,
        post: Post,
        comment_count: int,
        viewer_reactions: Iterable[ReactionKind],
        can_edit: bool,
        can_moderate: bool,
    ) -> "PostDetail":
        return cls(
            post_id=str(post.id),
            slug=str(post.slug),
            title=post.title,
            excerpt=post.excerpt,
            author_alias=post.author_alias,
            tag_names=[tag.root for tag in post.tag_names],
            reactions=ReactionSummary.build(post.reactions, viewer_reactions),
            comment_count=comment_count,
            published_at=post.published_at,
            content=post.content,
            content_html=render_markdown(post.content),
            created_at=post.created_at,
            updated_at=post.updated_at,
            can_edit=can_edit,
            can_moderate=can_moderate,
        )


def parse_comment_id(value: str) -> CommentId:
    """Parse a comment id from a path parameter.

    Raises:
        NotFoundError: If the value is not a valid id
    """
    try:
        return CommentId(UUID(value))
    except ValueError:
        raise NotFoundError("Comment", value)
