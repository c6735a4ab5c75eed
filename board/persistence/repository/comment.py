"""PostgreSQL implementation of Comment repository."""

from typing import Dict, List, Optional

import logfire
from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Comment
from board.domain.repository import CommentRepository
from board.domain.value import CommentId, PostId, ReactionCounts, ReactionKind
from board.persistence.mappers import comment_to_dict, row_to_comment, row_to_reactions
from board.persistence.tables import comments_table

REACTION_COLUMNS = [comments_table.c[kind.counter_field] for kind in ReactionKind]


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.post_id == post_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_posts(self, post_ids: List[PostId]) -> Dict[PostId, int]:
        """Count comments for several posts in one query."""
        counts: Dict[PostId, int] = {post_id: 0 for post_id in post_ids}
        if not post_ids:
            return counts

        stmt = (
            select(comments_table.c.post_id, func.count())
            .where(comments_table.c.post_id.in_(post_ids))
            .group_by(comments_table.c.post_id)
        )
        result = await self.session.execute(stmt)
        for post_id, count in result.fetchall():
            counts[PostId(post_id)] = count
        return counts

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        with logfire.span("comment_repository.save", comment_id=str(comment.id)):
            exists_stmt = select(comments_table.c.id).where(
                comments_table.c.id == comment.id
            )
            existing = (await self.session.execute(exists_stmt)).fetchone()

            comment_dict = comment_to_dict(comment)

            if existing:
                # id, post and parent never change; counters move atomically
                for key in ("id", "post_id", "parent_id"):
                    comment_dict.pop(key)
                for column in REACTION_COLUMNS:
                    comment_dict.pop(column.name)
                stmt = (
                    update(comments_table)
                    .where(comments_table.c.id == comment.id)
                    .values(**comment_dict)
                )
            else:
                stmt = insert(comments_table).values(**comment_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment; the parent_id foreign key cascades to replies."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post."""
        stmt = delete(comments_table).where(comments_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    async def adjust_reaction(
        self, comment_id: CommentId, kind: ReactionKind, delta: int
    ) -> Optional[ReactionCounts]:
        """Atomically move one reaction counter, never below zero."""
        column = comments_table.c[kind.counter_field]

        stmt = update(comments_table).where(comments_table.c.id == comment_id)
        if delta < 0:
            stmt = stmt.where(column > 0)
        stmt = stmt.values({column: column + delta}).returning(*REACTION_COLUMNS)

        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()

        if row is None:
            # Either the comment is gone or the counter was already zero
            current = await self.session.execute(
                select(*REACTION_COLUMNS).where(comments_table.c.id == comment_id)
            )
            row = current.fetchone()
            if row is None:
                return None

        return row_to_reactions(row._asdict())
