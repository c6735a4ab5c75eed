"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import List

from board.domain.model.tag import Tag
from board.domain.value import TagName


class TagRepository(ABC):
    """Repository for Tag entity."""

    @abstractmethod
    async def find_all(self) -> List[Tag]:
        """Find all tags ordered by name."""
        pass

    @abstractmethod
    async def upsert_many(self, names: List[TagName]) -> List[Tag]:
        """Create missing tags and return all requested ones.

        Args:
            names: Tag names

        Returns:
            Tags in the order of ``names``
        """
        pass
