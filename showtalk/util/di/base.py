"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal, Type

from dishka import Provider

from showtalk.util.error import DependencyInjectionError

# Infrastructure components that tests can swap for in-memory fakes
Component = Literal["clerk", "persistence"]


class ProviderBase(Provider):
    """Base for all DI providers with unified metadata.

    A provider class with subclasses is a mockable component: its subclasses
    are the production and mock implementations, told apart by ``__is_mock__``.
    A provider class without subclasses is used as-is.

    Attributes:
        __mock_component__: Component name (None for concrete providers)
        __is_mock__: Whether this is a mock implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, use_mock: bool) -> Type["ProviderBase"]:
        """Select the production or mock implementation of this provider.

        Raises:
            DependencyInjectionError: If no implementation of that kind exists
        """
        if not cls.is_mockable():
            return cls

        for impl in cls.__subclasses__():
            if impl.__is_mock__ == use_mock:
                return impl

        kind = "mock" if use_mock else "production"
        raise DependencyInjectionError(cls.__mock_component__ or cls.__name__, kind)
