"""PostgreSQL implementation of Tag repository."""

from datetime import datetime
from typing import List
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model.tag import Tag
from board.domain.repository.tag import TagRepository
from board.domain.value import TagId, TagName
from board.persistence.mappers import row_to_tag, tag_to_dict
from board.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def find_all(self) -> List[Tag]:
        """Find all tags ordered by name."""
        stmt = select(tags_table).order_by(tags_table.c.name)
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def upsert_many(self, names: List[TagName]) -> List[Tag]:
        """Create missing tags and return all requested ones."""
        if not names:
            return []

        now = datetime.now()
        values = [
            tag_to_dict(Tag(id=TagId(uuid4()), name=name, created_at=now))
            for name in names
        ]
        stmt = insert(tags_table).values(values).on_conflict_do_nothing(
            index_elements=[tags_table.c.name]
        )
        await self.session.execute(stmt)
        await self.session.flush()

        result = await self.session.execute(
            select(tags_table).where(
                tags_table.c.name.in_([name.root for name in names])
            )
        )
        by_name = {row.name: row_to_tag(row._asdict()) for row in result.fetchall()}
        return [by_name[name.root] for name in names if name.root in by_name]
