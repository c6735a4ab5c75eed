"""Reaction domain service."""

from dataclasses import dataclass

import logfire

from board.domain.error import InvalidReactionError, NotFoundError
from board.domain.repository import CommentRepository, PostRepository
from board.domain.value import CommentId, PostId, ReactionCounts, ReactionKind

from .base import Service


@dataclass(frozen=True)
class ReactionToggle:
    """Outcome of a reaction toggle."""

    kind: ReactionKind
    added: bool
    counts: ReactionCounts
    viewer_reactions: frozenset[ReactionKind]


class ReactionService(Service):
    """Toggles reactions on posts and comments.

    A viewer's reactions live in their browser, so the current set is passed
    in and the new set is handed back for the caller to store. Counters are
    moved by the repositories' atomic increment and never go below zero.
    """

    def __init__(
        self, post_repository: PostRepository, comment_repository: CommentRepository
    ) -> None:
        """Initialize reaction service.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    @staticmethod
    def parse_kind(value: str) -> ReactionKind:
        """Parse a reaction kind.

        Raises:
            InvalidReactionError: If the value is not one of the fixed kinds
        """
        try:
            return ReactionKind(value)
        except ValueError:
            raise InvalidReactionError(value)

    async def toggle_post_reaction(
        self,
        post_id: PostId,
        kind: ReactionKind,
        current: frozenset[ReactionKind],
    ) -> ReactionToggle:
        """Toggle one reaction on a post.

        Args:
            post_id: Post ID
            kind: Reaction kind
            current: Kinds the viewer already applied to this post

        Returns:
            New counters and the viewer's new reaction set

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span(
            "reaction_service.toggle_post_reaction",
            post_id=str(post_id),
            kind=kind.value,
        ):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Reaction on non-existent post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            removing = kind in current
            if removing and post.reactions.get(kind) == 0:
                counts = post.reactions
            else:
                counts = await self.post_repository.adjust_reaction(
                    post_id, kind, -1 if removing else 1
                )
                if counts is None:
                    raise NotFoundError("Post", str(post_id))

            toggle = self._toggled(kind, removing, counts, current)
            logfire.info(
                "Post reaction toggled",
                post_id=str(post_id),
                kind=kind.value,
                added=toggle.added,
                count=counts.get(kind),
            )
            return toggle

    async def toggle_comment_reaction(
        self,
        comment_id: CommentId,
        kind: ReactionKind,
        current: frozenset[ReactionKind],
    ) -> ReactionToggle:
        """Toggle one reaction on a comment.

        Args:
            comment_id: Comment ID
            kind: Reaction kind
            current: Kinds the viewer already applied to this comment

        Returns:
            New counters and the viewer's new reaction set

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span(
            "reaction_service.toggle_comment_reaction",
            comment_id=str(comment_id),
            kind=kind.value,
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn(
                    "Reaction on non-existent comment", comment_id=str(comment_id)
                )
                raise NotFoundError("Comment", str(comment_id))

            removing = kind in current
            if removing and comment.reactions.get(kind) == 0:
                counts = comment.reactions
            else:
                counts = await self.comment_repository.adjust_reaction(
                    comment_id, kind, -1 if removing else 1
                )
                if counts is None:
                    raise NotFoundError("Comment", str(comment_id))

            toggle = self._toggled(kind, removing, counts, current)
            logfire.info(
                "Comment reaction toggled",
                comment_id=str(comment_id),
                kind=kind.value,
                added=toggle.added,
                count=counts.get(kind),
            )
            return toggle

    @staticmethod
    def _toggled(
        kind: ReactionKind,
        removing: bool,
        counts: ReactionCounts,
        current: frozenset[ReactionKind],
    ) -> ReactionToggle:
        reactions = current - {kind} if removing else current | {kind}
        return ReactionToggle(
            kind=kind,
            added=not removing,
            counts=counts,
            viewer_reactions=frozenset(reactions),
        )
