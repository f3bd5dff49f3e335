"""Domain value objects for captions and voting."""

from humor.domain.value.identifiers import (
    CaptionExampleId,
    CaptionId,
    CaptionVoteId,
    ImageId,
    ProfileId,
)
from humor.domain.value.types import (
    AuthProvider,
    OAuthProviderInfo,
    VoteOutcome,
    VoteValue,
)

__all__ = [
    # Identifiers
    "ProfileId",
    "CaptionId",
    "CaptionVoteId",
    "ImageId",
    "CaptionExampleId",
    # Types
    "VoteValue",
    "VoteOutcome",
    "AuthProvider",
    "OAuthProviderInfo",
]
