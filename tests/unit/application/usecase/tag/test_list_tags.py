"""Unit tests for ListTagsUseCase."""

import pytest

from board.application.usecase.post import CreatePostRequest, CreatePostUseCase
from board.application.usecase.tag import ListTagsRequest, ListTagsUseCase
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListTagsUseCase:
    """Tests for ListTagsUseCase."""

    @pytest.mark.asyncio
    async def test_tags_created_by_posts_are_listed(self, unit_env):
        # Arrange
        create_post = await unit_env.get(CreatePostUseCase)
        list_tags = await unit_env.get(ListTagsUseCase)
        await create_post.execute(
            CreatePostRequest(
                title="Sleepless",
                content="Another night staring at the ceiling until sunrise.",
                tags=["sleep", "Anxiety"],
            )
        )

        # Act
        response = await list_tags.execute(ListTagsRequest())

        # Assert
        assert [tag.name for tag in response.tags] == ["anxiety", "sleep"]

    @pytest.mark.asyncio
    async def test_no_tags(self, unit_env):
        list_tags = await unit_env.get(ListTagsUseCase)

        response = await list_tags.execute(ListTagsRequest())

        assert response.tags == []

    @pytest.mark.asyncio
    async def test_prefix_narrows_suggestions(self, unit_env):
        create_post = await unit_env.get(CreatePostUseCase)
        list_tags = await unit_env.get(ListTagsUseCase)
        await create_post.execute(
            CreatePostRequest(
                title="Sleepless",
                content="Another night staring at the ceiling until sunrise.",
                tags=["sleep", "anxiety", "self-care"],
            )
        )

        response = await list_tags.execute(ListTagsRequest(prefix=" S "))

        assert [tag.name for tag in response.tags] == ["self-care", "sleep"]
