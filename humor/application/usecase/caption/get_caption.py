"""Get caption by ID use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from humor.domain.error import NotFoundError, StoreError
from humor.domain.model import AuthSession
from humor.domain.service import CaptionService, VoteService
from humor.domain.value import CaptionId

from ..base import BaseUseCase
from .common import CaptionItem, to_caption_item


class GetCaptionRequest(BaseModel):
    """Get caption request."""

    caption_id: UUID
    session: AuthSession | None = None


class GetCaptionResponse(BaseModel):
    """Get caption response."""

    caption: CaptionItem | None = None
    error: str | None = None


class GetCaptionUseCase(BaseUseCase[GetCaptionRequest, GetCaptionResponse]):
    """Use case for retrieving one caption with its score and the caller's vote."""

    def __init__(
        self, caption_service: CaptionService, vote_service: VoteService
    ) -> None:
        """Initialize get caption use case.

        Args:
            caption_service: Caption domain service
            vote_service: Vote domain service
        """
        self.caption_service = caption_service
        self.vote_service = vote_service

    async def execute(self, request: GetCaptionRequest) -> GetCaptionResponse:
        """Execute get caption flow.

        Args:
            request: Request with caption ID and the caller's session

        Returns:
            Caption details, or an error message if missing or unreadable
        """
        if request.session is None:
            return GetCaptionResponse(error="You must be logged in")

        caption_id = CaptionId(request.caption_id)

        try:
            caption = await self.caption_service.get_caption(caption_id)
        except (NotFoundError, StoreError) as e:
            logfire.warn(
                "Error fetching caption", caption_id=str(caption_id), error=str(e)
            )
            return GetCaptionResponse(error="Failed to fetch caption")

        try:
            vote_score, user_vote = await self.vote_service.get_score_and_user_vote(
                caption_id, request.session.user_id
            )
        except StoreError as e:
            logfire.warn(
                "Vote data unavailable", caption_id=str(caption_id), error=str(e)
            )
            vote_score, user_vote = 0, None

        return GetCaptionResponse(
            caption=to_caption_item(caption, vote_score, user_vote)
        )
