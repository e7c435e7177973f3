"""Dependency injection module."""

from typing import Type

from showtalk.util.di.application import ProdApplicationProvider
from showtalk.util.di.base import Component, ProviderBase
from showtalk.util.di.core import ProdConfigProvider
from showtalk.util.di.domain import ProdDomainProvider
from showtalk.util.di.infrastructure import (
    ClerkProvider,
    PersistenceProvider,
    ProdClerkProvider,
    ProdPersistenceProvider,
)

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    ClerkProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Get appropriate provider class.

    Concrete providers are returned as-is; mockable components resolve to
    their production or mock implementation.

    Args:
        base: Provider base class
        use_mock: Whether to use mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If requested implementation not found
    """
    return base.implementation(use_mock)


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "ClerkProvider",
    "PersistenceProvider",
    # Infrastructure implementations
    "ProdClerkProvider",
    "ProdPersistenceProvider",
]
