"""Provider base class and component selection."""

from typing import ClassVar, Literal, get_args

from dishka import Provider

# Components that tests can swap for mocks
Component = Literal["google", "persistence"]
COMPONENTS: frozenset[Component] = frozenset(get_args(Component))


class ProviderBase(Provider):
    """Provider that knows whether it is a swappable component.

    A component base names itself in ``__mock_component__``; its production
    and mock implementations subclass it and set ``__is_mock__``. A provider
    nobody subclasses is used as it is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def implementation(cls, mock: bool = False) -> type["ProviderBase"]:
        """Pick the production or mock subclass of this provider.

        Mock subclasses are only found once the module defining them has
        been imported (the test suite does this in ``tests.di``).

        Raises:
            ValueError: If the requested implementation does not exist
        """
        subclasses = cls.__subclasses__()
        if not subclasses:
            return cls

        for subclass in subclasses:
            if subclass.__is_mock__ == mock:
                return subclass

        kind = "mock" if mock else "production"
        raise ValueError(
            f"No {kind} implementation for {cls.__mock_component__ or cls.__name__}"
        )
