"""Dependency injection wiring.

Every provider class in :data:`PROVIDERS` is either concrete or the base
of a mockable component. :func:`get_provider` resolves a base to the
implementation to instantiate, so the production container and the test
container are built from the same list.
"""

from typing import Type

from qna.util.di.application import ProdApplicationProvider
from qna.util.di.base import Component, ProviderBase
from qna.util.di.core import ProdConfigProvider
from qna.util.di.domain import ProdDomainProvider
from qna.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,  # mockable: "persistence"
]


def is_mockable(base: Type[ProviderBase]) -> bool:
    return bool(base.__subclasses__())


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for ``base``.

    Args:
        base: Entry from :data:`PROVIDERS`
        use_mock: Select the ``__is_mock__`` implementation of a mockable base

    Returns:
        ``base`` itself when it is concrete, otherwise the matching subclass

    Raises:
        ValueError: If a mockable base has no implementation of that kind
    """
    if not is_mockable(base):
        return base

    for impl in base.__subclasses__():
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    component = getattr(base, "__mock_component__", None) or base.__name__
    raise ValueError(f"No {kind} implementation registered for {component}")


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
    "is_mockable",
]
