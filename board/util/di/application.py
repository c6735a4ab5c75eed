"""Application layer DI providers."""

from dishka import Scope, provide

from board.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    UpdateCommentUseCase,
)
from board.application.usecase.moderation import (
    GetModerationStatusUseCase,
    OpenModerationSessionUseCase,
)
from board.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from board.application.usecase.reaction import (
    ToggleCommentReactionUseCase,
    TogglePostReactionUseCase,
)
from board.application.usecase.tag import ListTagsUseCase
from board.domain.repository import CommentRepository
from board.domain.service import (
    CommentService,
    ModerationService,
    OwnershipService,
    PostService,
    ReactionService,
    TagService,
)
from board.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self,
        post_service: PostService,
        tag_service: TagService,
        ownership_service: OwnershipService,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service,
            tag_service=tag_service,
            ownership_service=ownership_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self,
        post_service: PostService,
        ownership_service: OwnershipService,
        moderation_service: ModerationService,
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(
            post_service=post_service,
            ownership_service=ownership_service,
            moderation_service=moderation_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self, post_service: PostService, comment_repository: CommentRepository
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(
            post_service=post_service, comment_repository=comment_repository
        )

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(
        self,
        post_service: PostService,
        tag_service: TagService,
        ownership_service: OwnershipService,
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            post_service=post_service,
            tag_service=tag_service,
            ownership_service=ownership_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(
        self,
        post_service: PostService,
        ownership_service: OwnershipService,
        moderation_service: ModerationService,
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(
            post_service=post_service,
            ownership_service=ownership_service,
            moderation_service=moderation_service,
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        ownership_service: OwnershipService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            ownership_service=ownership_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        ownership_service: OwnershipService,
        moderation_service: ModerationService,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            post_service=post_service,
            ownership_service=ownership_service,
            moderation_service=moderation_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService, ownership_service: OwnershipService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service, ownership_service=ownership_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        comment_service: CommentService,
        ownership_service: OwnershipService,
        moderation_service: ModerationService,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service,
            ownership_service=ownership_service,
            moderation_service=moderation_service,
        )

    # Reaction use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_post_reaction_use_case(
        self, reaction_service: ReactionService, post_service: PostService
    ) -> TogglePostReactionUseCase:
        """Provide toggle post reaction use case."""
        return TogglePostReactionUseCase(
            reaction_service=reaction_service, post_service=post_service
        )

    @provide(scope=Scope.REQUEST)
    def get_toggle_comment_reaction_use_case(
        self, reaction_service: ReactionService
    ) -> ToggleCommentReactionUseCase:
        """Provide toggle comment reaction use case."""
        return ToggleCommentReactionUseCase(reaction_service=reaction_service)

    # Moderation use cases
    @provide(scope=Scope.REQUEST)
    def get_open_moderation_session_use_case(
        self, moderation_service: ModerationService
    ) -> OpenModerationSessionUseCase:
        """Provide open moderation session use case."""
        return OpenModerationSessionUseCase(moderation_service=moderation_service)

    @provide(scope=Scope.REQUEST)
    def get_moderation_status_use_case(
        self, moderation_service: ModerationService
    ) -> GetModerationStatusUseCase:
        """Provide moderation status use case."""
        return GetModerationStatusUseCase(moderation_service=moderation_service)

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)
