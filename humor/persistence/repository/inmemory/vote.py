"""In-memory caption vote repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError, NoResultFound

from humor.domain.model import CaptionVote
from humor.domain.repository import CaptionVoteRepository
from humor.domain.value import CaptionId, CaptionVoteId, ProfileId, VoteValue


class InMemoryCaptionVoteRepository(CaptionVoteRepository):
    """In-memory implementation of CaptionVoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[CaptionVote] = []

    async def find_by_caption_and_profile(
        self, caption_id: CaptionId, profile_id: ProfileId
    ) -> Optional[CaptionVote]:
        """Find a profile's vote on a caption."""
        for vote in self._votes:
            if vote.caption_id == caption_id and vote.profile_id == profile_id:
                return vote
        return None

    async def find_by_caption(self, caption_id: CaptionId) -> list[CaptionVote]:
        """Find all votes on a caption."""
        return [v for v in self._votes if v.caption_id == caption_id]

    async def score_by_caption(self, caption_id: CaptionId) -> int:
        """Sum of vote values on a caption."""
        return sum(int(v.vote_value) for v in self._votes if v.caption_id == caption_id)

    async def find_caption_ids_by_profile(self, profile_id: ProfileId) -> set[CaptionId]:
        """IDs of every caption a profile has voted on."""
        return {v.caption_id for v in self._votes if v.profile_id == profile_id}

    async def find_by_profile(
        self, profile_id: ProfileId, limit: int, offset: int
    ) -> list[CaptionVote]:
        """A page of a profile's votes, newest first."""
        votes = sorted(
            (v for v in self._votes if v.profile_id == profile_id),
            key=lambda v: v.created_datetime_utc,
            reverse=True,
        )
        return votes[offset : offset + limit]

    async def count_by_profile(self, profile_id: ProfileId) -> int:
        """Count a profile's votes."""
        return sum(1 for v in self._votes if v.profile_id == profile_id)

    async def save(self, vote: CaptionVote) -> CaptionVote:
        """Insert a vote.

        Raises:
            IntegrityError: If the profile already voted on the caption
        """
        existing = await self.find_by_caption_and_profile(
            vote.caption_id, vote.profile_id
        )
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes.append(vote)
        return vote

    async def update_value(
        self, vote_id: CaptionVoteId, vote_value: VoteValue, modified_at: datetime
    ) -> CaptionVote:
        """Change the value of an existing vote in place."""
        for i, vote in enumerate(self._votes):
            if vote.id == vote_id:
                updated = vote.model_copy(
                    update={
                        "vote_value": vote_value,
                        "modified_datetime_utc": modified_at,
                    }
                )
                self._votes[i] = updated
                return updated
        raise NoResultFound(f"No vote {vote_id}")

    async def delete(self, vote_id: CaptionVoteId) -> None:
        """Delete a vote by ID."""
        self._votes = [v for v in self._votes if v.id != vote_id]
