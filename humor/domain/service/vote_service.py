"""Vote domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire
from sqlalchemy.exc import SQLAlchemyError

from humor.domain.error import StoreError, VoteLookupError, VoteWriteError
from humor.domain.model import CaptionVote
from humor.domain.repository import CaptionVoteRepository
from humor.domain.value import (
    CaptionId,
    CaptionVoteId,
    ProfileId,
    VoteOutcome,
    VoteValue,
)

from .base import Service


class VoteService(Service):
    """Domain service for caption vote operations."""

    def __init__(self, vote_repository: CaptionVoteRepository) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Caption vote repository
        """
        self.vote_repository = vote_repository

    async def cast_vote(
        self, caption_id: CaptionId, profile_id: ProfileId, vote_value: VoteValue
    ) -> VoteOutcome:
        """Record a vote as the authoritative write.

        - Same value as the existing vote: the vote is deleted (withdrawal)
        - Different value: the vote is updated in place
        - No existing vote: a new vote is inserted

        Failures are raised once; nothing is retried.

        Args:
            caption_id: Caption being voted on
            profile_id: Voter's profile ID
            vote_value: Up or down

        Returns:
            What happened to the stored vote

        Raises:
            VoteLookupError: If the existing vote cannot be read
            VoteWriteError: If the delete, update or insert fails
        """
        vote_value = VoteValue(vote_value)
        with logfire.span(
            "cast_vote",
            caption_id=str(caption_id),
            profile_id=str(profile_id),
            vote_value=int(vote_value),
        ):
            try:
                existing = await self.vote_repository.find_by_caption_and_profile(
                    caption_id, profile_id
                )
            except SQLAlchemyError as e:
                logfire.error("Error checking existing vote", error=str(e))
                raise VoteLookupError() from e

            if existing and existing.vote_value == vote_value:
                try:
                    await self.vote_repository.delete(existing.id)
                except SQLAlchemyError as e:
                    logfire.error("Error deleting vote", error=str(e))
                    raise VoteWriteError("Failed to remove vote") from e
                logfire.info("Vote withdrawn", vote_id=str(existing.id))
                return VoteOutcome.WITHDRAWN

            now = datetime.now(timezone.utc)

            if existing:
                try:
                    await self.vote_repository.update_value(
                        existing.id, vote_value, modified_at=now
                    )
                except SQLAlchemyError as e:
                    logfire.error("Error updating vote", error=str(e))
                    raise VoteWriteError("Failed to update vote") from e
                logfire.info("Vote changed", vote_id=str(existing.id))
                return VoteOutcome.CHANGED

            vote = CaptionVote(
                id=CaptionVoteId(uuid4()),
                caption_id=caption_id,
                profile_id=profile_id,
                vote_value=vote_value,
                created_datetime_utc=now,
            )
            try:
                await self.vote_repository.save(vote)
            except SQLAlchemyError as e:
                logfire.error("Error inserting vote", error=str(e))
                raise VoteWriteError("Failed to submit vote") from e
            logfire.info("Vote created", vote_id=str(vote.id))
            return VoteOutcome.CREATED

    async def get_user_vote(
        self, caption_id: CaptionId, profile_id: ProfileId
    ) -> VoteValue | None:
        """Get a profile's current vote on a caption.

        Raises:
            VoteLookupError: If the vote cannot be read
        """
        try:
            vote = await self.vote_repository.find_by_caption_and_profile(
                caption_id, profile_id
            )
        except SQLAlchemyError as e:
            logfire.error("Error reading user vote", error=str(e))
            raise VoteLookupError() from e
        return vote.vote_value if vote else None

    async def get_voted_caption_ids(self, profile_id: ProfileId) -> set[CaptionId]:
        """IDs of captions a profile has voted on.

        Raises:
            VoteLookupError: If the votes cannot be read
        """
        try:
            return await self.vote_repository.find_caption_ids_by_profile(profile_id)
        except SQLAlchemyError as e:
            logfire.error("Error fetching voted captions", error=str(e))
            raise VoteLookupError("Error fetching voted captions") from e

    async def get_vote_score(self, caption_id: CaptionId) -> int:
        """Net score of a caption, recomputed from all of its votes.

        Raises:
            StoreError: If the votes cannot be read
        """
        try:
            return await self.vote_repository.score_by_caption(caption_id)
        except SQLAlchemyError as e:
            logfire.error(
                "Error computing vote score", caption_id=str(caption_id), error=str(e)
            )
            raise StoreError(f"Database error: {e}") from e

    async def get_score_and_user_vote(
        self, caption_id: CaptionId, profile_id: ProfileId
    ) -> tuple[int, VoteValue | None]:
        """Score of a caption and the profile's vote on it, from one query.

        Raises:
            StoreError: If the votes cannot be read
        """
        try:
            votes = await self.vote_repository.find_by_caption(caption_id)
        except SQLAlchemyError as e:
            logfire.error(
                "Error fetching caption votes", caption_id=str(caption_id), error=str(e)
            )
            raise StoreError(f"Database error: {e}") from e

        score = sum(int(vote.vote_value) for vote in votes)
        user_vote = next(
            (vote.vote_value for vote in votes if vote.profile_id == profile_id), None
        )
        return score, user_vote

    async def get_history_page(
        self, profile_id: ProfileId, page: int, per_page: int
    ) -> tuple[list[CaptionVote], int]:
        """A page of a profile's votes, newest first, with the total count.

        Args:
            profile_id: Voter's profile ID
            page: 1-based page number
            per_page: Page size

        Returns:
            Tuple of (votes on this page, total number of votes)

        Raises:
            StoreError: If the votes cannot be read
        """
        offset = (page - 1) * per_page
        with logfire.span(
            "vote_service.get_history_page",
            profile_id=str(profile_id),
            page=page,
            per_page=per_page,
        ):
            try:
                total = await self.vote_repository.count_by_profile(profile_id)
                votes = await self.vote_repository.find_by_profile(
                    profile_id, limit=per_page, offset=offset
                )
            except SQLAlchemyError as e:
                logfire.error("Error fetching voted history", error=str(e))
                raise StoreError(f"Database error: {e}") from e
            return votes, total
