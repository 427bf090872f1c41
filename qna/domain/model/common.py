"""Shared base for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity.

    Changes are made with ``model_copy(update=...)`` and saved back, never
    by mutating an instance another caller might hold.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
