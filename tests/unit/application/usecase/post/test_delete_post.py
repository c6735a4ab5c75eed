"""Unit tests for DeletePostUseCase."""

import pytest

from board.application.usecase.post import DeletePostRequest, DeletePostUseCase
from board.config import ModerationSettings
from board.domain.error import NotAuthorizedError, NotFoundError
from board.domain.repository import CommentRepository, PostRepository
from board.domain.service import ModerationService, OwnershipService, PostService
from board.domain.value import Viewer
from tests.factories import make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestDeletePostUseCase:
    """Tests for DeletePostUseCase."""

    @pytest.mark.asyncio
    async def test_owner_deletes_post_and_comments(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeletePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.save(make_post(slug="bye", token="owner"))
        await comment_repo.save(make_comment(post.id))

        # Act
        response = await use_case.execute(
            DeletePostRequest(slug="bye", viewer=Viewer(post_tokens={post.id: "owner"}))
        )

        # Assert
        assert not response.by_moderator
        assert await post_repo.find_by_id(post.id) is None
        assert await comment_repo.count_by_post(post.id) == 0

    @pytest.mark.asyncio
    async def test_moderator_deletes_post(self, unit_env):
        post_repo = await unit_env.get(PostRepository)
        moderation_service = ModerationService(ModerationSettings(secret="s3cret"))
        use_case = DeletePostUseCase(
            post_service=await unit_env.get(PostService),
            ownership_service=await unit_env.get(OwnershipService),
            moderation_service=moderation_service,
        )
        post = await post_repo.save(make_post(slug="spam"))
        viewer = Viewer(moderation_token=moderation_service.open_session("s3cret"))

        response = await use_case.execute(DeletePostRequest(slug="spam", viewer=viewer))

        assert response.by_moderator
        assert await post_repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_stranger_cannot_delete(self, unit_env):
        use_case = await unit_env.get(DeletePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(slug="keep-me"))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(DeletePostRequest(slug="keep-me"))

        assert await post_repo.find_by_id(post.id) is not None

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        use_case = await unit_env.get(DeletePostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(DeletePostRequest(slug="gone"))
