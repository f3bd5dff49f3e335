"""Get user vote use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from humor.domain.error import DomainError
from humor.domain.model import AuthSession
from humor.domain.service import VoteService
from humor.domain.value import CaptionId, VoteValue

from ..base import BaseUseCase


class GetUserVoteRequest(BaseModel):
    """Get user vote request."""

    caption_id: UUID
    session: AuthSession | None = None


class GetUserVoteResponse(BaseModel):
    """Get user vote response."""

    vote: VoteValue | None = None


class GetUserVoteUseCase(BaseUseCase[GetUserVoteRequest, GetUserVoteResponse]):
    """Use case for reading the caller's current vote on a caption."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetUserVoteRequest) -> GetUserVoteResponse:
        """Return the caller's vote, or no vote when logged out or unreadable."""
        if request.session is None:
            return GetUserVoteResponse()

        try:
            vote = await self.vote_service.get_user_vote(
                CaptionId(request.caption_id), request.session.user_id
            )
        except DomainError as e:
            logfire.warn(
                "Could not read user vote",
                caption_id=str(request.caption_id),
                error=str(e),
            )
            return GetUserVoteResponse()

        return GetUserVoteResponse(vote=vote)
