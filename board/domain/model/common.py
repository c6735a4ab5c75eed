"""Base model for board entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Frozen entity; services derive changed copies with ``model_copy``."""

    model_config = ConfigDict(frozen=True)
