"""Use case contract shared by the application layer."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One caller action: a validated request in, a serializable response out.

    Use cases own no state of their own. They call domain services, which
    raise ``DomainError`` subclasses that the HTTP layer translates.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        """Run the action."""
