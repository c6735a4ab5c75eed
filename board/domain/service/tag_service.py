"""Tag domain service."""

import logfire

from board.domain.model.tag import Tag
from board.domain.repository.tag import TagRepository
from board.domain.value import TagName

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def ensure_tags(self, tag_names: list[TagName]) -> list[Tag]:
        """Create any tags that don't exist yet.

        Args:
            tag_names: Tag names attached to a post

        Returns:
            Tags in the order requested
        """
        if not tag_names:
            return []

        with logfire.span(
            "tag_service.ensure_tags", tags=[name.root for name in tag_names]
        ):
            tags = await self.tag_repository.upsert_many(tag_names)
            logfire.info("Tags ensured", count=len(tags))
            return tags

    async def get_all_tags(self) -> list[Tag]:
        """Get all tags ordered by name."""
        with logfire.span("tag_service.get_all_tags"):
            tags = await self.tag_repository.find_all()
            logfire.info("Tags retrieved", count=len(tags))
            return tags
