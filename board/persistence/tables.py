"""SQLAlchemy table definitions for the board.

These table definitions are used with SQLAlchemy Core.
Timestamps are stored without time zone and handled as naive local time.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()


def _reaction_columns() -> list[Column]:
    """One non-negative counter per reaction kind."""
    return [
        Column(name, Integer, nullable=False, server_default="0")
        for name in (
            "reaction_thumbs_up",
            "reaction_heart",
            "reaction_hope",
            "reaction_clap",
        )
    ]


# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("name", String(30), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("slug", String(100), nullable=False, unique=True),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False),  # Markdown source
    Column("excerpt", Text, nullable=False, server_default=""),
    Column("author_alias", String(40), nullable=True),
    Column("author_token", String(255), nullable=True),
    *_reaction_columns(),
    Column(
        "published_at",
        TIMESTAMP(timezone=False),
        nullable=False,
        server_default="NOW()",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "reaction_thumbs_up >= 0 AND reaction_heart >= 0 "
        "AND reaction_hope >= 0 AND reaction_clap >= 0",
        name="post_reactions_non_negative",
    ),
)

Index("idx_posts_published_at", posts_table.c.published_at.desc())

# ============================================================================
# POST_TAGS TABLE (junction table for many-to-many relationship)
# ============================================================================
post_tags_table = Table(
    "post_tags",
    metadata,
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("tag_id", UUID, ForeignKey("tags.id", ondelete="CASCADE"), nullable=False),
    # Keeps the order tags were given in
    Column("position", Integer, nullable=False, server_default="0"),
    UniqueConstraint("post_id", "tag_id", name="uq_post_tag"),
)

Index("idx_post_tags_post_id", post_tags_table.c.post_id)
Index("idx_post_tags_tag_id", post_tags_table.c.tag_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("content", Text, nullable=False),  # Markdown source
    Column("author_alias", String(40), nullable=True),
    Column("author_token", String(255), nullable=True),
    *_reaction_columns(),
    Column(
        "created_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "reaction_thumbs_up >= 0 AND reaction_heart >= 0 "
        "AND reaction_hope >= 0 AND reaction_clap >= 0",
        name="comment_reactions_non_negative",
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_created_at", comments_table.c.created_at)
