"""Caption vote repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Set

from humor.domain.model.vote import CaptionVote
from humor.domain.value import CaptionId, CaptionVoteId, ProfileId, VoteValue


class CaptionVoteRepository(ABC):
    """Repository for CaptionVote entity.

    The store enforces one vote per (caption, profile). Any read-modify-write
    atomicity is the store's concern.
    """

    @abstractmethod
    async def find_by_caption_and_profile(
        self, caption_id: CaptionId, profile_id: ProfileId
    ) -> Optional[CaptionVote]:
        """Find a profile's vote on a caption.

        Args:
            caption_id: The caption's ID
            profile_id: The voter's profile ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_caption(self, caption_id: CaptionId) -> List[CaptionVote]:
        """Find all votes on a caption.

        Args:
            caption_id: The caption's ID

        Returns:
            List of votes on the caption
        """
        pass

    @abstractmethod
    async def score_by_caption(self, caption_id: CaptionId) -> int:
        """Sum of vote values on a caption.

        Args:
            caption_id: The caption's ID

        Returns:
            Net score, 0 when nobody has voted
        """
        pass

    @abstractmethod
    async def find_caption_ids_by_profile(self, profile_id: ProfileId) -> Set[CaptionId]:
        """IDs of every caption a profile has voted on.

        Args:
            profile_id: The voter's profile ID

        Returns:
            Set of caption IDs
        """
        pass

    @abstractmethod
    async def find_by_profile(
        self, profile_id: ProfileId, limit: int, offset: int
    ) -> List[CaptionVote]:
        """A page of a profile's votes, newest first.

        Args:
            profile_id: The voter's profile ID
            limit: Maximum number of votes to return
            offset: Number of votes to skip

        Returns:
            Votes ordered by ``created_datetime_utc`` descending
        """
        pass

    @abstractmethod
    async def count_by_profile(self, profile_id: ProfileId) -> int:
        """Count a profile's votes.

        Args:
            profile_id: The voter's profile ID

        Returns:
            Number of votes
        """
        pass

    @abstractmethod
    async def save(self, vote: CaptionVote) -> CaptionVote:
        """Insert a new vote.

        Args:
            vote: The vote to insert

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the profile already voted on the caption
        """
        pass

    @abstractmethod
    async def update_value(
        self, vote_id: CaptionVoteId, vote_value: VoteValue, modified_at: datetime
    ) -> CaptionVote:
        """Change the value of an existing vote in place.

        Args:
            vote_id: The vote to change
            vote_value: New value
            modified_at: New ``modified_datetime_utc``

        Returns:
            The updated vote
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: CaptionVoteId) -> None:
        """Delete a vote.

        Args:
            vote_id: The vote ID to delete
        """
        pass
