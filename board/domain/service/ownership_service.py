"""Ownership domain service.

There are no accounts: whoever presents a resource's token owns it. Tokens
are issued once at creation time and compared by exact equality.
"""

import secrets
from typing import Callable

from board.domain.model.comment import Comment
from board.domain.model.post import Post
from board.domain.value import OwnershipToken, Viewer

from .base import Service


class OwnershipService(Service):
    """Issues ownership tokens and checks them against a viewer."""

    @staticmethod
    def issue_token() -> OwnershipToken:
        """Generate a fresh opaque ownership token."""
        return OwnershipToken(secrets.token_urlsafe(32))

    @staticmethod
    def owns_post(post: Post, viewer: Viewer) -> bool:
        """Whether the viewer presents the post's token."""
        if post.author_token is None:
            return False
        return post.author_token.matches(viewer.post_token(post.id))

    @staticmethod
    def owns_comment(comment: Comment, viewer: Viewer) -> bool:
        """Whether the viewer presents the comment's token."""
        if comment.author_token is None:
            return False
        return comment.author_token.matches(viewer.comment_token(comment.id))

    def comment_predicate(self, viewer: Viewer) -> Callable[[Comment], bool]:
        """Bind the comment ownership check to a viewer."""
        return lambda comment: self.owns_comment(comment, viewer)
