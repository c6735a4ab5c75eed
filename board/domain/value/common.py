"""Immutable bases for value objects."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel

T = TypeVar("T")


class ValueObject(BaseModel):
    """Frozen model compared field by field (reaction counts, viewer)."""

    model_config = ConfigDict(frozen=True)


class RootValueObject(RootModel[T], Generic[T]):
    """Frozen wrapper around one validated primitive (slug, tag, token).

    Serializes to the bare primitive; ``str()`` gives the wrapped value so
    these can be dropped into log fields and URLs directly.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
