"""Provider base class and the names of swappable components."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a production and an in-memory implementation
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for every provider in this package.

    A mockable component is declared as a subclass that sets
    ``__mock_component__``; its implementations subclass that again and set
    ``__is_mock__``. Plain providers leave both at their defaults.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
