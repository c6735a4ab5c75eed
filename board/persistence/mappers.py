"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Sequence
from uuid import UUID

from board.domain.model import Comment, Post, Tag
from board.domain.value import (
    CommentId,
    OwnershipToken,
    PostId,
    ReactionCounts,
    ReactionKind,
    Slug,
    TagId,
    TagName,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_reactions(row: Dict[str, Any]) -> ReactionCounts:
    """Read the four reaction counter columns of a row."""
    return ReactionCounts(
        **{kind.value: row[kind.counter_field] for kind in ReactionKind}
    )


def reactions_to_dict(reactions: ReactionCounts) -> Dict[str, int]:
    """Spread reaction counters into their columns."""
    return {kind.counter_field: reactions.get(kind) for kind in ReactionKind}


def row_to_post(row: Dict[str, Any], tag_names: Sequence[str] = ()) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict
        tag_names: Names of the post's tags, in order

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        slug=Slug(row["slug"]),
        title=row["title"],
        content=row["content"],
        excerpt=row.get("excerpt") or "",
        author_alias=row.get("author_alias"),
        author_token=OwnershipToken(row["author_token"])
        if row.get("author_token")
        else None,
        tag_names=[TagName(name) for name in tag_names],
        reactions=row_to_reactions(row),
        published_at=row["published_at"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Tag names live in ``post_tags`` and are excluded.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": post.id,
        "slug": post.slug.root,
        "title": post.title,
        "content": post.content,
        "excerpt": post.excerpt,
        "author_alias": post.author_alias,
        "author_token": post.author_token.root if post.author_token else None,
        **reactions_to_dict(post.reactions),
        "published_at": post.published_at,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        content=row["content"],
        author_alias=row.get("author_alias"),
        author_token=OwnershipToken(row["author_token"])
        if row.get("author_token")
        else None,
        reactions=row_to_reactions(row),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": comment.id,
        "post_id": comment.post_id,
        "parent_id": comment.parent_id,
        "content": comment.content,
        "author_alias": comment.author_alias,
        "author_token": comment.author_token.root if comment.author_token else None,
        **reactions_to_dict(comment.reactions),
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
    }


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(
        id=TagId(_uuid(row["id"])),
        name=TagName(row["name"]),
        created_at=row["created_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict."""
    return {"id": tag.id, "name": tag.name.root, "created_at": tag.created_at}
