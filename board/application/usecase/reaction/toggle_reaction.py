"""Toggle reaction use cases."""

from pydantic import BaseModel, Field

from board.application.usecase.base import BaseUseCase
from board.application.usecase.common import ReactionSummary, parse_comment_id
from board.domain.service import PostService, ReactionService
from board.domain.value import ReactionKind, Viewer


class TogglePostReactionRequest(BaseModel):
    """Toggle a reaction on a post."""

    slug: str
    kind: str  # Validated against the fixed set
    viewer: Viewer = Field(default_factory=Viewer)


class ToggleCommentReactionRequest(BaseModel):
    """Toggle a reaction on a comment."""

    comment_id: str
    kind: str
    viewer: Viewer = Field(default_factory=Viewer)


class ToggleReactionResponse(BaseModel):
    """Toggle reaction response.

    ``reactions.viewer_reactions`` is the set the caller should now remember
    for the target; an empty list means nothing is left to remember.
    """

    target_id: str
    kind: ReactionKind
    added: bool
    reactions: ReactionSummary


class TogglePostReactionUseCase(
    BaseUseCase[TogglePostReactionRequest, ToggleReactionResponse]
):
    """Use case for toggling a reaction on a post."""

    def __init__(
        self, reaction_service: ReactionService, post_service: PostService
    ) -> None:
        """Initialize toggle post reaction use case.

        Args:
            reaction_service: Reaction domain service
            post_service: Post domain service
        """
        self.reaction_service = reaction_service
        self.post_service = post_service

    async def execute(
        self, request: TogglePostReactionRequest
    ) -> ToggleReactionResponse:
        """Execute toggle flow.

        Raises:
            InvalidReactionError: If the kind is unknown
            NotFoundError: If the post doesn't exist
        """
        kind = self.reaction_service.parse_kind(request.kind)
        post = await self.post_service.get_post_by_slug(request.slug)

        toggle = await self.reaction_service.toggle_post_reaction(
            post.id, kind, request.viewer.reactions_for_post(post.id)
        )

        return ToggleReactionResponse(
            target_id=str(post.id),
            kind=toggle.kind,
            added=toggle.added,
            reactions=ReactionSummary.build(toggle.counts, toggle.viewer_reactions),
        )


class ToggleCommentReactionUseCase(
    BaseUseCase[ToggleCommentReactionRequest, ToggleReactionResponse]
):
    """Use case for toggling a reaction on a comment."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize toggle comment reaction use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(
        self, request: ToggleCommentReactionRequest
    ) -> ToggleReactionResponse:
        """Execute toggle flow.

        Raises:
            InvalidReactionError: If the kind is unknown
            NotFoundError: If the comment doesn't exist
        """
        kind = self.reaction_service.parse_kind(request.kind)
        comment_id = parse_comment_id(request.comment_id)

        toggle = await self.reaction_service.toggle_comment_reaction(
            comment_id, kind, request.viewer.reactions_for_comment(comment_id)
        )

        return ToggleReactionResponse(
            target_id=str(comment_id),
            kind=toggle.kind,
            added=toggle.added,
            reactions=ReactionSummary.build(toggle.counts, toggle.viewer_reactions),
        )
