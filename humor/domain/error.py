"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ProfileNotFoundError(DomainError):
    """Raised when the authenticated user has no profile record."""

    def __init__(self, profile_id: str):
        self.profile_id = profile_id
        super().__init__("Could not find user profile")


class VoteLookupError(DomainError):
    """Raised when the existing vote for a caption cannot be read."""

    def __init__(self, message: str = "Error checking existing vote"):
        super().__init__(message)


class VoteWriteError(DomainError):
    """Raised when inserting, updating or deleting a vote fails."""

    def __init__(self, message: str):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class StoreError(DomainError):
    """Raised when the content store rejects or fails a query."""

    def __init__(self, message: str):
        super().__init__(message)
