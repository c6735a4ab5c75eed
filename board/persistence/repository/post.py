"""PostgreSQL implementation of Post repository."""

from collections import defaultdict
from typing import List, Optional
from uuid import UUID

import logfire
from sqlalchemy import Select, delete, desc, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Post
from board.domain.repository.post import PostRepository, PostSortOrder
from board.domain.value import PostId, ReactionCounts, ReactionKind, Slug, TagName
from board.persistence.mappers import post_to_dict, row_to_post, row_to_reactions
from board.persistence.tables import post_tags_table, posts_table, tags_table

REACTION_COLUMNS = [posts_table.c[kind.counter_field] for kind in ReactionKind]


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_tags_for_posts(
        self, post_ids: list[UUID]
    ) -> dict[UUID, list[str]]:
        """Fetch tags for multiple posts in a single query.

        Args:
            post_ids: List of post IDs

        Returns:
            Dict mapping post_id -> list of tag names
        """
        if not post_ids:
            return {}

        stmt = (
            select(post_tags_table.c.post_id, tags_table.c.name)
            .select_from(post_tags_table)
            .join(tags_table, post_tags_table.c.tag_id == tags_table.c.id)
            .where(post_tags_table.c.post_id.in_(post_ids))
            .order_by(post_tags_table.c.position)
        )
        result = await self.session.execute(stmt)
        rows = result.fetchall()

        # Build lookup: post_id -> [tag_names]
        post_tag_map: dict[UUID, list[str]] = defaultdict(list)
        for row in rows:
            post_tag_map[row.post_id].append(row.name)

        return post_tag_map

    async def _rows_to_posts(self, rows) -> List[Post]:
        post_tag_map = await self._fetch_tags_for_posts([row.id for row in rows])
        return [
            row_to_post(row._asdict(), tag_names=post_tag_map.get(row.id, []))
            for row in rows
        ]

    @staticmethod
    def _filtered(
        stmt: Select, tag: Optional[TagName], query: Optional[str]
    ) -> Select:
        # Filter by tag (join with post_tags and tags tables)
        if tag:
            stmt = (
                stmt.join(
                    post_tags_table, posts_table.c.id == post_tags_table.c.post_id
                )
                .join(tags_table, post_tags_table.c.tag_id == tags_table.c.id)
                .where(tags_table.c.name == tag.root)
            )

        # Case-insensitive substring search; % and _ in the query are literal
        if query:
            stmt = stmt.where(
                or_(
                    posts_table.c.title.icontains(query, autoescape=True),
                    posts_table.c.excerpt.icontains(query, autoescape=True),
                    posts_table.c.content.icontains(query, autoescape=True),
                )
            )

        return stmt

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Post not found", post_id=str(post_id))
                return None

            return (await self._rows_to_posts([row]))[0]

    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by slug."""
        with logfire.span("post_repository.find_by_slug", slug=str(slug)):
            stmt = select(posts_table).where(posts_table.c.slug == slug.root)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Post not found by slug", slug=str(slug))
                return None

            return (await self._rows_to_posts([row]))[0]

    async def slug_exists(self, slug: Slug) -> bool:
        """Check if a slug is taken."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(posts_table.c.slug == slug.root)
        )
        result = await self.session.execute(stmt)
        exists = (result.scalar() or 0) > 0

        logfire.debug("Slug existence check", slug=str(slug), exists=exists)
        return exists

    async def find_all(
        self,
        sort: PostSortOrder = PostSortOrder.RECENT,
        tag: Optional[TagName] = None,
        query: Optional[str] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts with filtering and pagination."""
        with logfire.span(
            "post_repository.find_all",
            sort=sort.value,
            tag=tag.root if tag else None,
            query=query,
            limit=limit,
            offset=offset,
        ):
            stmt = self._filtered(
                select(posts_table).select_from(posts_table), tag, query
            )

            # Sort order
            if sort == PostSortOrder.SUPPORT:
                total = sum(REACTION_COLUMNS[1:], REACTION_COLUMNS[0])
                stmt = stmt.order_by(desc(total), desc(posts_table.c.published_at))
            else:
                stmt = stmt.order_by(desc(posts_table.c.published_at))

            # Pagination
            stmt = stmt.limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            post_rows = result.fetchall()

            if not post_rows:
                logfire.info("No posts found")
                return []

            posts = await self._rows_to_posts(post_rows)
            logfire.info("Found posts", count=len(posts))
            return posts

    async def count(
        self,
        tag: Optional[TagName] = None,
        query: Optional[str] = None,
    ) -> int:
        """Count posts matching the given filters."""
        stmt = self._filtered(
            select(func.count()).select_from(posts_table), tag, query
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span(
            "post_repository.save",
            post_id=str(post.id),
            tags=[t.root for t in post.tag_names],
        ):
            exists_stmt = select(posts_table.c.id).where(posts_table.c.id == post.id)
            existing = (await self.session.execute(exists_stmt)).fetchone()

            post_dict = post_to_dict(post)

            if existing:
                # Reaction counters only move through adjust_reaction
                for column in REACTION_COLUMNS:
                    post_dict.pop(column.name)
                stmt = (
                    update(posts_table)
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                )
                await self.session.execute(stmt)

                await self.session.execute(
                    delete(post_tags_table).where(post_tags_table.c.post_id == post.id)
                )
            else:
                logfire.info("Inserting new post", post_id=str(post.id))
                await self.session.execute(insert(posts_table).values(**post_dict))

            # Look up tag IDs from tag names
            if post.tag_names:
                tag_result = await self.session.execute(
                    select(tags_table.c.id, tags_table.c.name).where(
                        tags_table.c.name.in_([tag.root for tag in post.tag_names])
                    )
                )
                tag_id_map = {row.name: row.id for row in tag_result.fetchall()}

                for position, tag_name in enumerate(post.tag_names):
                    tag_id = tag_id_map.get(tag_name.root)
                    if tag_id:
                        await self.session.execute(
                            insert(post_tags_table).values(
                                post_id=post.id, tag_id=tag_id, position=position
                            )
                        )

            await self.session.flush()
            logfire.info("Post saved successfully", post_id=str(post.id))
            return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete)."""
        stmt = delete(posts_table).where(posts_table.c.id == post_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def adjust_reaction(
        self, post_id: PostId, kind: ReactionKind, delta: int
    ) -> Optional[ReactionCounts]:
        """Atomically move one reaction counter, never below zero."""
        column = posts_table.c[kind.counter_field]

        stmt = update(posts_table).where(posts_table.c.id == post_id)
        if delta < 0:
            stmt = stmt.where(column > 0)
        stmt = stmt.values({column: column + delta}).returning(*REACTION_COLUMNS)

        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()

        if row is None:
            # Either the post is gone or the counter was already zero
            current = await self.session.execute(
                select(*REACTION_COLUMNS).where(posts_table.c.id == post_id)
            )
            row = current.fetchone()
            if row is None:
                return None

        return row_to_reactions(row._asdict())
