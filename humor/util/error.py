"""Errors raised while wiring the application together."""


class ConfigurationError(Exception):
    """A required setting is missing or unusable."""
