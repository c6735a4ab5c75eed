"""In-memory post repository for testing."""

from typing import List, Optional

from board.domain.model.post import Post
from board.domain.repository.post import PostRepository, PostSortOrder
from board.domain.value import PostId, ReactionCounts, ReactionKind, Slug, TagName


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    def _filtered(
        self, tag: Optional[TagName], query: Optional[str]
    ) -> List[Post]:
        posts = list(self._posts.values())

        # Filter by tag
        if tag is not None:
            posts = [p for p in posts if tag in p.tag_names]

        # Filter by case-insensitive substring
        if query:
            needle = query.lower()
            posts = [
                p
                for p in posts
                if needle in p.title.lower()
                or needle in p.excerpt.lower()
                or needle in p.content.lower()
            ]

        return posts

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by slug."""
        for post in self._posts.values():
            if post.slug == slug:
                return post
        return None

    async def slug_exists(self, slug: Slug) -> bool:
        """Check if a slug is taken."""
        return any(post.slug == slug for post in self._posts.values())

    async def find_all(
        self,
        sort: PostSortOrder = PostSortOrder.RECENT,
        tag: Optional[TagName] = None,
        query: Optional[str] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts with filtering and pagination."""
        posts = self._filtered(tag, query)

        # Sort
        if sort == PostSortOrder.SUPPORT:
            posts.sort(
                key=lambda p: (p.reactions.total, p.published_at), reverse=True
            )
        else:
            posts.sort(key=lambda p: p.published_at, reverse=True)

        # Paginate
        return posts[offset : offset + limit]

    async def count(
        self,
        tag: Optional[TagName] = None,
        query: Optional[str] = None,
    ) -> int:
        """Count posts matching the given filters."""
        return len(self._filtered(tag, query))

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        existing = self._posts.get(post.id)
        if existing is not None:
            # Reaction counters only move through adjust_reaction
            post = post.model_copy(update={"reactions": existing.reactions})
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post."""
        self._posts.pop(post_id, None)

    async def adjust_reaction(
        self, post_id: PostId, kind: ReactionKind, delta: int
    ) -> Optional[ReactionCounts]:
        """Move one reaction counter, floored at zero."""
        post = self._posts.get(post_id)
        if post is None:
            return None

        reactions = post.reactions.adjusted(kind, delta)
        self._posts[post_id] = post.model_copy(update={"reactions": reactions})
        return reactions
