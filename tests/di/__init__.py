"""Test doubles for the DI container."""

from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = ["MockPersistenceProvider", "build_test_container"]
