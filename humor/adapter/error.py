"""Errors from external systems the API talks to."""


class AdapterError(Exception):
    pass


class ProviderError(AdapterError):
    """The sign-in provider refused a request or could not be reached.

    Routes treat it as a failed login, never as a server error.
    """
