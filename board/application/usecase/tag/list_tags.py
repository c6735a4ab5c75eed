"""List tags use case."""

from datetime import datetime

from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.domain.model.tag import Tag
from board.domain.service import TagService


class TagItem(BaseModel):
    """A tag as shown in filters and post form suggestions."""

    name: str
    created_at: datetime

    @classmethod
    def from_tag(cls, tag: Tag) -> "TagItem":
        return cls(name=tag.name.root, created_at=tag.created_at)


class ListTagsRequest(BaseModel):
    """List tags request.

    ``prefix`` narrows the list for suggestions while typing; it is compared
    after trimming and lowercasing, the same way tags are stored.
    """

    prefix: str | None = None


class ListTagsResponse(BaseModel):
    """Tags in alphabetical order."""

    tags: list[TagItem]


class ListTagsUseCase(BaseUseCase[ListTagsRequest, ListTagsResponse]):
    """Lists every tag on the board, optionally by prefix."""

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        tags = await self.tag_service.get_all_tags()

        prefix = (request.prefix or "").strip().lower()
        if prefix:
            tags = [tag for tag in tags if tag.name.root.startswith(prefix)]

        return ListTagsResponse(tags=[TagItem.from_tag(tag) for tag in tags])
