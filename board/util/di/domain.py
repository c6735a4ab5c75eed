"""Domain layer DI providers."""

from dishka import Scope, provide

from board.config import CommentSettings, ContentSettings, ModerationSettings
from board.domain.repository import (
    CommentRepository,
    PostRepository,
    TagRepository,
)
from board.domain.service import (
    CommentService,
    ModerationService,
    OwnershipService,
    PostService,
    ReactionService,
    TagService,
)
from board.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_ownership_service(self) -> OwnershipService:
        """Provide ownership domain service."""
        return OwnershipService()

    @provide
    def get_moderation_service(
        self, moderation_settings: ModerationSettings
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(moderation_settings=moderation_settings)

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        content_settings: ContentSettings,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            comment_repository=comment_repository,
            content_settings=content_settings,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        content_settings: ContentSettings,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            content_settings=content_settings,
            comment_settings=comment_settings,
        )

    @provide
    def get_reaction_service(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> ReactionService:
        """Provide reaction domain service."""
        return ReactionService(
            post_repository=post_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)
