"""Tag entity."""

from datetime import datetime

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import TagId, TagName


class Tag(DomainModel):
    """Free-form label attached to posts.

    Tags are created on first use.
    """

    id: TagId
    name: TagName
    created_at: datetime = Field(default_factory=datetime.now)
