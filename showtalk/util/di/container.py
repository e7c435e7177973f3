"""Dependency injection container."""

from typing import Callable

from dishka import AsyncContainer, make_async_container

from showtalk.util.di import PROVIDERS, Component, ProviderBase


def assemble_providers(use_mock: Callable[[Component], bool]) -> list[ProviderBase]:
    """Instantiate one provider per entry in PROVIDERS.

    Args:
        use_mock: Decides, per mockable component, whether its mock is used.
                  Concrete providers are never asked.

    Returns:
        Provider instances ready for ``make_async_container``
    """
    instances: list[ProviderBase] = []
    for base in PROVIDERS:
        component = base.__mock_component__
        mock = base.is_mockable() and component is not None and use_mock(component)
        instances.append(base.implementation(mock)())
    return instances


def create_container() -> AsyncContainer:
    """Build production container (all prod implementations).

    Settings are loaded from environment variables automatically.
    """
    return make_async_container(*assemble_providers(lambda component: False))
