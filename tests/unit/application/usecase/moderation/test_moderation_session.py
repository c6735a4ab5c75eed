"""Unit tests for the moderation session use cases."""

import pytest

from board.application.usecase.moderation import (
    GetModerationStatusRequest,
    GetModerationStatusUseCase,
    OpenModerationSessionRequest,
    OpenModerationSessionUseCase,
)
from board.domain.error import InvalidModerationSecretError, ModerationDisabledError
from board.domain.value import Viewer
from tests.harness import create_env_fixture

# Unit test fixtures
unit_env = create_env_fixture()
moderated_env = create_env_fixture(
    environ={
        "MODERATION__SECRET": "s3cret",
        "MODERATION__SESSION_MAX_AGE": "600",
    }
)


class TestOpenModerationSession:
    """Tests for OpenModerationSessionUseCase."""

    @pytest.mark.asyncio
    async def test_disabled_by_default(self, unit_env):
        use_case = await unit_env.get(OpenModerationSessionUseCase)

        with pytest.raises(ModerationDisabledError):
            await use_case.execute(OpenModerationSessionRequest(secret="anything"))

    @pytest.mark.asyncio
    async def test_login_and_status(self, moderated_env):
        # Arrange
        login = await moderated_env.get(OpenModerationSessionUseCase)
        status = await moderated_env.get(GetModerationStatusUseCase)

        # Act
        session = await login.execute(OpenModerationSessionRequest(secret="s3cret"))
        active = await status.execute(
            GetModerationStatusRequest(viewer=Viewer(moderation_token=session.token))
        )
        inactive = await status.execute(GetModerationStatusRequest())

        # Assert
        assert session.max_age == 600
        assert active.enabled and active.active
        assert inactive.enabled and not inactive.active

    @pytest.mark.asyncio
    async def test_wrong_secret(self, moderated_env):
        use_case = await moderated_env.get(OpenModerationSessionUseCase)

        with pytest.raises(InvalidModerationSecretError):
            await use_case.execute(OpenModerationSessionRequest(secret="nope"))

    @pytest.mark.asyncio
    async def test_status_when_disabled(self, unit_env):
        use_case = await unit_env.get(GetModerationStatusUseCase)

        response = await use_case.execute(GetModerationStatusRequest())

        assert not response.enabled
        assert not response.active
