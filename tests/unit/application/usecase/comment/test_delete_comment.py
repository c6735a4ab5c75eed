"""Unit tests for DeleteCommentUseCase."""

import pytest

from board.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from board.config import ModerationSettings
from board.domain.error import NotAuthorizedError
from board.domain.repository import CommentRepository
from board.domain.service import CommentService, ModerationService, OwnershipService
from board.domain.value import Viewer
from tests.factories import make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_owner_deletes_comment_with_replies(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        post = make_post()
        comment = await comment_repo.save(make_comment(post.id, token="mine"))
        await comment_repo.save(make_comment(post.id, parent_id=comment.id))

        # Act
        response = await use_case.execute(
            DeleteCommentRequest(
                comment_id=str(comment.id),
                viewer=Viewer(comment_tokens={comment.id: "mine"}),
            )
        )

        # Assert
        assert response.post_id == str(post.id)
        assert not response.by_moderator
        assert await comment_repo.count_by_post(post.id) == 0

    @pytest.mark.asyncio
    async def test_moderator_deletes_comment(self, unit_env):
        comment_repo = await unit_env.get(CommentRepository)
        moderation_service = ModerationService(ModerationSettings(secret="s3cret"))
        use_case = DeleteCommentUseCase(
            comment_service=await unit_env.get(CommentService),
            ownership_service=await unit_env.get(OwnershipService),
            moderation_service=moderation_service,
        )
        comment = await comment_repo.save(make_comment(make_post().id))
        viewer = Viewer(moderation_token=moderation_service.open_session("s3cret"))

        response = await use_case.execute(
            DeleteCommentRequest(comment_id=str(comment.id), viewer=viewer)
        )

        assert response.by_moderator
        assert await comment_repo.find_by_id(comment.id) is None

    @pytest.mark.asyncio
    async def test_stranger_cannot_delete(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(make_post().id))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(DeleteCommentRequest(comment_id=str(comment.id)))
