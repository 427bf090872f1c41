"""Shared base for single-value value objects."""

from typing import Generic, TypeVar

from pydantic import ConfigDict, RootModel

T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one primitive, e.g. ``Username("alice")``.

    Serializes as the bare primitive; the wrapped value is ``.root``.
    Equal values compare and hash equal, so they work as dict keys and
    in ``in`` checks against lists of the same type.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
