"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure that tests replace with in-process fakes
Component = Literal["broadcast", "persistence"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider class without subclasses is concrete and always used as is.
    A provider class with subclasses names a swappable ``__mock_component__``;
    its subclasses are the production (``__is_mock__ = False``) and mock
    implementations.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, use_mock: bool = False) -> type["ProviderBase"]:
        """Select the provider class to instantiate for this component.

        Raises:
            ValueError: If the component has no implementation of that kind
        """
        if not cls.is_mockable():
            return cls

        for impl in cls.__subclasses__():
            if impl.__is_mock__ == use_mock:
                return impl

        kind = "mock" if use_mock else "production"
        raise ValueError(
            f"No {kind} implementation for {cls.__mock_component__ or cls.__name__}"
        )
