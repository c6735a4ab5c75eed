"""Test configuration and fixtures."""

import logfire
import pytest

# Keep spans local; nothing is exported during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture(autouse=True)
def test_settings_env(monkeypatch):
    """Baseline environment for Settings loaded inside test containers."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.delenv("MODERATION__SECRET", raising=False)
