"""Repository interfaces for the caption domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from humor.domain.repository.caption import CaptionRepository
from humor.domain.repository.caption_example import CaptionExampleRepository
from humor.domain.repository.profile import ProfileRepository
from humor.domain.repository.vote import CaptionVoteRepository

__all__ = [
    "CaptionRepository",
    "CaptionExampleRepository",
    "CaptionVoteRepository",
    "ProfileRepository",
]
