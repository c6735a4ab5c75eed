"""In-memory tag repository for testing."""

from datetime import datetime
from typing import List
from uuid import uuid4

from board.domain.model.tag import Tag
from board.domain.repository.tag import TagRepository
from board.domain.value import TagId, TagName


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self) -> None:
        self._tags: dict[str, Tag] = {}

    async def find_all(self) -> List[Tag]:
        """Find all tags ordered by name."""
        return [self._tags[name] for name in sorted(self._tags)]

    async def upsert_many(self, names: List[TagName]) -> List[Tag]:
        """Create missing tags and return all requested ones."""
        tags = []
        for name in names:
            if name.root not in self._tags:
                self._tags[name.root] = Tag(
                    id=TagId(uuid4()), name=name, created_at=datetime.now()
                )
            tags.append(self._tags[name.root])
        return tags
