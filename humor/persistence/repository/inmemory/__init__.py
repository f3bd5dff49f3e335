"""In-memory repository implementations for testing."""

from .caption import InMemoryCaptionRepository
from .caption_example import InMemoryCaptionExampleRepository
from .profile import InMemoryProfileRepository
from .vote import InMemoryCaptionVoteRepository

__all__ = [
    "InMemoryCaptionRepository",
    "InMemoryCaptionExampleRepository",
    "InMemoryCaptionVoteRepository",
    "InMemoryProfileRepository",
]
