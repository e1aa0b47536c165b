"""Dependency injection module."""

from chatter.util.di.application import ProdApplicationProvider
from chatter.util.di.base import Component, ProviderBase
from chatter.util.di.core import ProdConfigProvider
from chatter.util.di.domain import ProdDomainProvider
from chatter.util.di.infrastructure import (
    BroadcastProvider,
    PersistenceProvider,
    ProdBroadcastProvider,
    ProdPersistenceProvider,
)

# Every container is assembled from this list, in this order
PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    BroadcastProvider,
    PersistenceProvider,
]

__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "BroadcastProvider",
    "PersistenceProvider",
    "ProdBroadcastProvider",
    "ProdPersistenceProvider",
]
