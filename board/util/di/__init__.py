"""Dependency injection module."""

from collections.abc import Collection
from typing import Type

from board.util.di.application import ProdApplicationProvider
from board.util.di.base import COMPONENTS, Component, ProviderBase
from board.util.di.core import ProdConfigProvider
from board.util.di.domain import ProdDomainProvider

# Imported for its subclasses; get_provider looks them up at runtime
from board.util.di.persistence import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the implementation of a provider.

    A provider without subclasses is concrete and returned as is. Otherwise
    the subclass whose ``__is_mock__`` flag equals ``use_mock`` wins.

    Raises:
        ValueError: If the requested implementation is not registered
    """
    subclasses = base.__subclasses__()
    if not subclasses:
        return base

    for candidate in subclasses:
        if getattr(candidate, "__is_mock__", False) == use_mock:
            return candidate

    kind = "mock" if use_mock else "production"
    component = base.__mock_component__ or base.__name__
    raise ValueError(f"No {kind} implementation for {component}")


def instantiate_providers(mocked: Collection[Component] = ()) -> list[ProviderBase]:
    """Instantiate every provider in :data:`PROVIDERS`.

    Args:
        mocked: Components to serve from their mock implementation

    Returns:
        Provider instances ready for ``make_async_container``
    """
    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "COMPONENTS",
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "instantiate_providers",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
