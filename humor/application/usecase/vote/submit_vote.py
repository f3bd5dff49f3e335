"""Submit vote use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from humor.domain.error import DomainError
from humor.domain.model import AuthSession
from humor.domain.service import ProfileService, VoteService
from humor.domain.value import CaptionId, VoteOutcome, VoteValue

from ..base import BaseUseCase


class SubmitVoteRequest(BaseModel):
    """Submit vote request."""

    caption_id: UUID
    vote_value: VoteValue
    session: AuthSession | None = None  # None when the caller is not logged in


class SubmitVoteResponse(BaseModel):
    """Submit vote response.

    ``error`` is set exactly when ``success`` is false.
    """

    success: bool
    error: str | None = None
    outcome: VoteOutcome | None = None


class SubmitVoteUseCase(BaseUseCase[SubmitVoteRequest, SubmitVoteResponse]):
    """Use case for voting a caption up or down.

    Repeating the same vote withdraws it; the opposite vote replaces it.
    """

    def __init__(
        self, profile_service: ProfileService, vote_service: VoteService
    ) -> None:
        """Initialize submit vote use case.

        Args:
            profile_service: Profile domain service
            vote_service: Vote domain service
        """
        self.profile_service = profile_service
        self.vote_service = vote_service

    async def execute(self, request: SubmitVoteRequest) -> SubmitVoteResponse:
        """Execute submit vote flow.

        Steps:
        1. Require a session
        2. Load the voter's profile
        3. Delete, update or insert the vote

        Args:
            request: Submit vote request

        Returns:
            Structured result; store failures never propagate
        """
        if request.session is None:
            logfire.warn("Vote rejected - not authenticated")
            return SubmitVoteResponse(
                success=False, error="You must be logged in to vote"
            )

        try:
            profile = await self.profile_service.get_by_id(request.session.user_id)
            outcome = await self.vote_service.cast_vote(
                CaptionId(request.caption_id), profile.id, request.vote_value
            )
        except DomainError as e:
            logfire.warn(
                "Vote failed",
                caption_id=str(request.caption_id),
                user_id=str(request.session.user_id),
                error=str(e),
            )
            return SubmitVoteResponse(success=False, error=str(e))

        return SubmitVoteResponse(success=True, outcome=outcome)
