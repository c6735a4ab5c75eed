"""Unit tests for the in-memory repositories used by the test container."""

from datetime import datetime, timedelta

import pytest

from board.domain.repository import PostSortOrder
from board.domain.value import ReactionCounts, ReactionKind, TagName
from board.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryPostRepository,
    InMemoryTagRepository,
)
from tests.factories import make_comment, make_post


class TestInMemoryPostRepository:
    """Tests for InMemoryPostRepository."""

    @pytest.mark.asyncio
    async def test_save_does_not_overwrite_reactions(self):
        repo = InMemoryPostRepository()
        post = await repo.save(make_post())
        await repo.adjust_reaction(post.id, ReactionKind.HEART, 1)

        await repo.save(post.model_copy(update={"title": "Renamed"}))

        stored = await repo.find_by_id(post.id)
        assert stored.title == "Renamed"
        assert stored.reactions.heart == 1

    @pytest.mark.asyncio
    async def test_adjust_reaction_floors_at_zero(self):
        repo = InMemoryPostRepository()
        post = await repo.save(make_post())

        counts = await repo.adjust_reaction(post.id, ReactionKind.CLAP, -1)

        assert counts == ReactionCounts()

    @pytest.mark.asyncio
    async def test_support_ties_break_by_recency(self):
        repo = InMemoryPostRepository()
        base = datetime(2024, 1, 1)
        old = await repo.save(
            make_post(reactions=ReactionCounts(hope=1), published_at=base)
        )
        new = await repo.save(
            make_post(
                reactions=ReactionCounts(heart=1), published_at=base + timedelta(1)
            )
        )

        assert await repo.find_all(sort=PostSortOrder.SUPPORT) == [new, old]

    @pytest.mark.asyncio
    async def test_query_and_tag_filters(self):
        repo = InMemoryPostRepository()
        match = await repo.save(make_post(title="Exam stress", tags=("school",)))
        await repo.save(make_post(title="Exam stress"))
        await repo.save(make_post(title="Other", tags=("school",)))

        posts = await repo.find_all(tag=TagName("school"), query="EXAM")

        assert posts == [match]
        assert await repo.count(tag=TagName("school"), query="exam") == 1


class TestInMemoryCommentRepository:
    """Tests for InMemoryCommentRepository."""

    @pytest.mark.asyncio
    async def test_delete_cascades_to_descendants(self):
        repo = InMemoryCommentRepository()
        post = make_post()
        root = await repo.save(make_comment(post.id))
        child = await repo.save(make_comment(post.id, parent_id=root.id))
        await repo.save(make_comment(post.id, parent_id=child.id))
        other = await repo.save(make_comment(post.id))

        await repo.delete(root.id)

        assert await repo.find_by_post(post.id) == [other]

    @pytest.mark.asyncio
    async def test_count_by_posts_includes_empty_posts(self):
        repo = InMemoryCommentRepository()
        busy = make_post()
        quiet = make_post()
        await repo.save(make_comment(busy.id))
        await repo.save(make_comment(busy.id))

        counts = await repo.count_by_posts([busy.id, quiet.id])

        assert counts == {busy.id: 2, quiet.id: 0}


class TestInMemoryTagRepository:
    """Tests for InMemoryTagRepository."""

    @pytest.mark.asyncio
    async def test_upsert_keeps_existing_ids(self):
        repo = InMemoryTagRepository()
        [first] = await repo.upsert_many([TagName("work")])

        tags = await repo.upsert_many([TagName("sleep"), TagName("work")])

        assert [tag.name.root for tag in tags] == ["sleep", "work"]
        assert tags[1].id == first.id
