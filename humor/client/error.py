"""Client layer errors."""


class ClientError(Exception):
    """Base client error."""

    pass


class ApiRequestError(ClientError):
    """The API could not be reached or answered with an error status."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
