"""PostgreSQL repository implementations."""

from humor.persistence.repository.caption import PostgresCaptionRepository
from humor.persistence.repository.caption_example import (
    PostgresCaptionExampleRepository,
)
from humor.persistence.repository.profile import PostgresProfileRepository
from humor.persistence.repository.vote import PostgresCaptionVoteRepository

__all__ = [
    "PostgresCaptionRepository",
    "PostgresCaptionExampleRepository",
    "PostgresCaptionVoteRepository",
    "PostgresProfileRepository",
]
