"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal, get_args

from dishka import Provider

# Components that tests may replace with in-memory implementations
Component = Literal["persistence"]
COMPONENTS: frozenset[Component] = frozenset(get_args(Component))


class ProviderBase(Provider):
    """Base for all board providers.

    Attributes:
        __mock_component__: Component a provider implements, None when the
            provider is concrete and never mocked
        __is_mock__: Whether this is the test implementation of the component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
