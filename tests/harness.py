"""Fixture factory shared by unit and integration tests."""

import pytest_asyncio

from board.util.di import Component
from tests.di import build_test_container


def create_env_fixture(
    unmock: set[Component] | None = None, environ: dict[str, str] | None = None
):
    """Return a fixture yielding a REQUEST-scoped container.

    Every component is in-memory unless named in ``unmock``; integration
    tests pass ``{"persistence"}`` and need ``DATABASE__URL`` to point at a
    running PostgreSQL. ``environ`` is applied with ``monkeypatch`` before
    the container reads ``Settings``::

        unit_env = create_env_fixture()
        moderated_env = create_env_fixture(environ={"MODERATION__SECRET": "x"})

        @pytest.mark.asyncio
        async def test_something(unit_env):
            service = await unit_env.get(PostService)
    """

    @pytest_asyncio.fixture
    async def _test_environment(monkeypatch):
        for key, value in (environ or {}).items():
            monkeypatch.setenv(key, value)

        container = build_test_container(unmock=unmock)
        try:
            async with container() as request_container:
                yield request_container
        finally:
            await container.close()

    return _test_environment
