"""Base class for domain services."""


class Service:
    """Base class for domain services.

    Services sit on top of the repository interfaces, turn store failures
    into domain errors and report through logfire.
    """

    pass
