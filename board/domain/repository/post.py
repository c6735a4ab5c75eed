"""Post repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from board.domain.model.post import Post
from board.domain.value import PostId, ReactionCounts, ReactionKind, Slug, TagName


class PostSortOrder(str, Enum):
    """Orderings offered on the post listing.

    Ties always fall back to ``published_at`` descending.
    """

    RECENT = "recent"
    SUPPORT = "support"  # sum of all reaction counters


class PostRepository(ABC):
    """Storage for posts, their tag names and reaction counters.

    ``tag`` filters compare normalized tag names exactly. ``query`` is a
    case-insensitive substring test over title, excerpt and content.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        pass

    @abstractmethod
    async def slug_exists(self, slug: Slug) -> bool:
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: PostSortOrder = PostSortOrder.RECENT,
        tag: Optional[TagName] = None,
        query: Optional[str] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Post]:
        """Return one page of posts in ``sort`` order."""
        pass

    @abstractmethod
    async def count(
        self,
        tag: Optional[TagName] = None,
        query: Optional[str] = None,
    ) -> int:
        """Total posts matching the filters, ignoring pagination."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert or replace a post, including its tag links."""
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Remove the post; its comments and tag links go with it."""
        pass

    @abstractmethod
    async def adjust_reaction(
        self, post_id: PostId, kind: ReactionKind, delta: int
    ) -> Optional[ReactionCounts]:
        """Move one reaction counter by ``delta`` (+1 or -1) in place.

        The update happens in the store, not read-modify-write, so
        concurrent toggles do not lose counts. Counters never go below zero.

        Returns:
            Counters after the update, or None if the post doesn't exist
        """
        pass
