"""initial_schema

Create the schema for the board:
- Tags (free-form labels, created on first use)
- Posts (anonymous Markdown posts owned through an opaque token)
- Post tags (ordered many-to-many link)
- Comments (threaded through parent_id, cascading on post and parent deletion)

Reaction counters live on posts and comments as four non-negative integer
columns.

Revision ID: 3c1f0b7d9a24
Revises:
Create Date: 2026-10-17 09:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f0b7d9a24"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

REACTION_COLUMNS = (
    "reaction_thumbs_up",
    "reaction_heart",
    "reaction_hope",
    "reaction_clap",
)

NON_NEGATIVE_REACTIONS = " AND ".join(f"{name} >= 0" for name in REACTION_COLUMNS)


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("gen_random_uuid()"),
        nullable=False,
    )


def _timestamp_column(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=False),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def _reaction_columns() -> list[sa.Column]:
    return [
        sa.Column(name, sa.Integer(), nullable=False, server_default="0")
        for name in REACTION_COLUMNS
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # gen_random_uuid() is built in from PostgreSQL 13, older servers need pgcrypto
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # ========================================================================
    # TAGS table
    # ========================================================================
    op.create_table(
        "tags",
        _id_column(),
        sa.Column("name", sa.String(30), nullable=False),
        _timestamp_column("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_tag_name"),
    )

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        _id_column(),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("excerpt", sa.Text(), nullable=False, server_default=""),
        sa.Column("author_alias", sa.String(40), nullable=True),
        sa.Column("author_token", sa.String(255), nullable=True),
        *_reaction_columns(),
        _timestamp_column("published_at"),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="uq_post_slug"),
        sa.CheckConstraint(NON_NEGATIVE_REACTIONS, name="post_reactions_non_negative"),
    )
    op.create_index(
        "idx_posts_published_at", "posts", [sa.text("published_at DESC")]
    )

    # ========================================================================
    # POST_TAGS table (junction)
    # ========================================================================
    op.create_table(
        "post_tags",
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("tag_id", sa.UUID(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("post_id", "tag_id", name="uq_post_tag"),
    )
    op.create_index("idx_post_tags_post_id", "post_tags", ["post_id"])
    op.create_index("idx_post_tags_tag_id", "post_tags", ["tag_id"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        _id_column(),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author_alias", sa.String(40), nullable=True),
        sa.Column("author_token", sa.String(255), nullable=True),
        *_reaction_columns(),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="CASCADE"),
        sa.CheckConstraint(
            NON_NEGATIVE_REACTIONS, name="comment_reactions_non_negative"
        ),
    )
    op.create_index("idx_comments_post_id", "comments", ["post_id"])
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])
    op.create_index("idx_comments_created_at", "comments", ["created_at"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("comments")
    op.drop_table("post_tags")
    op.drop_table("posts")
    op.drop_table("tags")
