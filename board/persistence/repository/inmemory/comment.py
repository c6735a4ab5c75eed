"""In-memory comment repository for testing."""

from typing import Dict, List, Optional

from board.domain.model.comment import Comment
from board.domain.repository.comment import CommentRepository
from board.domain.value import CommentId, PostId, ReactionCounts, ReactionKind


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, oldest first."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post."""
        return sum(1 for c in self._comments.values() if c.post_id == post_id)

    async def count_by_posts(self, post_ids: List[PostId]) -> Dict[PostId, int]:
        """Count comments for several posts."""
        counts: Dict[PostId, int] = {post_id: 0 for post_id in post_ids}
        for comment in self._comments.values():
            if comment.post_id in counts:
                counts[comment.post_id] += 1
        return counts

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        existing = self._comments.get(comment.id)
        if existing is not None:
            comment = comment.model_copy(update={"reactions": existing.reactions})
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and every reply beneath it."""
        doomed = [comment_id]
        while doomed:
            current = doomed.pop()
            if self._comments.pop(current, None) is None:
                continue
            doomed.extend(
                c.id for c in self._comments.values() if c.parent_id == current
            )

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post."""
        ids = [c.id for c in self._comments.values() if c.post_id == post_id]
        for comment_id in ids:
            del self._comments[comment_id]
        return len(ids)

    async def adjust_reaction(
        self, comment_id: CommentId, kind: ReactionKind, delta: int
    ) -> Optional[ReactionCounts]:
        """Move one reaction counter, floored at zero."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None

        reactions = comment.reactions.adjusted(kind, delta)
        self._comments[comment_id] = comment.model_copy(
            update={"reactions": reactions}
        )
        return reactions
