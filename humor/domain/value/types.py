"""Domain value objects for captions and voting.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum, IntEnum

from humor.domain.value.common import ValueObject


class VoteValue(IntEnum):
    """Value of a caption vote.

    A vote is either up or down. Withdrawing a vote deletes the record,
    there is no zero value.
    """

    UP = 1
    DOWN = -1

    @property
    def opposite(self) -> "VoteValue":
        return VoteValue(-self.value)


class AuthProvider(str, Enum):
    """Supported authentication providers."""

    GOOGLE = "google"


class OAuthProviderInfo(ValueObject):
    """User info returned from an OAuth provider."""

    provider: AuthProvider
    provider_user_id: str  # Stable subject identifier at the provider
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    avatar_url: str | None = None
    verified: bool = False


class VoteOutcome(str, Enum):
    """What an authoritative vote write did to the stored vote."""

    CREATED = "created"
    CHANGED = "changed"
    WITHDRAWN = "withdrawn"
