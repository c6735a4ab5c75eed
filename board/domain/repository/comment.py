"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from board.domain.model.comment import Comment
from board.domain.value import CommentId, PostId, ReactionCounts, ReactionKind


class CommentRepository(ABC):
    """Storage for comments as flat records keyed by post.

    Tree shape is never stored beyond ``parent_id``; assembling threads is
    the domain's job.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post as a flat list.

        Ordered by creation time (oldest first). Callers must not rely on
        parents preceding their replies.

        Args:
            post_id: The post ID

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post.

        Args:
            post_id: The post ID

        Returns:
            Number of comments
        """
        pass

    @abstractmethod
    async def count_by_posts(self, post_ids: List[PostId]) -> Dict[PostId, int]:
        """Count comments for several posts in one query.

        Args:
            post_ids: Post IDs

        Returns:
            Mapping of every requested post ID to its comment count
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and, through storage cascade, its replies.

        Args:
            comment_id: The comment ID to delete
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post.

        Args:
            post_id: The post ID

        Returns:
            Number of comments deleted
        """
        pass

    @abstractmethod
    async def adjust_reaction(
        self, comment_id: CommentId, kind: ReactionKind, delta: int
    ) -> Optional[ReactionCounts]:
        """Atomically move one reaction counter by +1 or -1, floored at zero.

        Args:
            comment_id: The comment ID
            kind: Reaction kind
            delta: +1 or -1

        Returns:
            Counters after the update, or None if the comment doesn't exist
        """
        pass
