"""Dependency injection wiring.

``PROVIDERS`` lists every provider once. Component bases (``GoogleProvider``,
``PersistenceProvider``) are resolved to their production or mock subclass
when a container is built.
"""

from typing import Collection

from humor.util.di.application import ApplicationProvider
from humor.util.di.base import COMPONENTS, Component, ProviderBase
from humor.util.di.core import ConfigProvider
from humor.util.di.domain import DomainProvider
from humor.util.di.infrastructure import (
    GoogleProvider,
    OAuthAggregatorProvider,
    PersistenceProvider,
)

PROVIDERS: list[type[ProviderBase]] = [
    ConfigProvider,
    DomainProvider,
    ApplicationProvider,
    GoogleProvider,
    PersistenceProvider,
    OAuthAggregatorProvider,
]


def build_providers(mocked: Collection[Component] = ()) -> list[ProviderBase]:
    """Instantiate every provider, using mocks for the named components.

    Args:
        mocked: Components to replace with their mock implementation

    Returns:
        Provider instances ready for ``make_async_container``
    """
    return [
        base.implementation(mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "COMPONENTS",
    "Component",
    "PROVIDERS",
    "ProviderBase",
    "build_providers",
]
