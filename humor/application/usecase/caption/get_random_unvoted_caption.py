"""Get random unvoted caption use case."""

import logfire
from pydantic import BaseModel

from humor.domain.error import StoreError, VoteLookupError
from humor.domain.model import AuthSession
from humor.domain.service import CaptionService, VoteService

from ..base import BaseUseCase
from .common import CaptionItem, to_caption_item


class GetRandomUnvotedCaptionRequest(BaseModel):
    """Get random unvoted caption request."""

    session: AuthSession | None = None


class GetRandomUnvotedCaptionResponse(BaseModel):
    """Get random unvoted caption response.

    ``caption`` is None exactly when ``error`` explains why.
    """

    caption: CaptionItem | None = None
    error: str | None = None


class GetRandomUnvotedCaptionUseCase(
    BaseUseCase[GetRandomUnvotedCaptionRequest, GetRandomUnvotedCaptionResponse]
):
    """Use case for picking a public caption the caller has not voted on."""

    def __init__(
        self, caption_service: CaptionService, vote_service: VoteService
    ) -> None:
        """Initialize get random unvoted caption use case.

        Args:
            caption_service: Caption domain service
            vote_service: Vote domain service
        """
        self.caption_service = caption_service
        self.vote_service = vote_service

    async def execute(
        self, request: GetRandomUnvotedCaptionRequest
    ) -> GetRandomUnvotedCaptionResponse:
        """Execute random caption selection.

        Steps:
        1. Load the IDs of captions the caller voted on
        2. Load all public captions
        3. Pick one uniformly at random from those not voted on
        4. Attach its current vote score

        Args:
            request: Request with the caller's session

        Returns:
            The chosen caption, or an error message
        """
        if request.session is None:
            return GetRandomUnvotedCaptionResponse(error="You must be logged in")

        user_id = request.session.user_id

        with logfire.span("get_random_unvoted_caption.execute", user_id=str(user_id)):
            try:
                voted_ids = await self.vote_service.get_voted_caption_ids(user_id)
            except VoteLookupError as e:
                # Selection still works, it may just repeat a caption
                logfire.warn("Proceeding without voted captions", error=str(e))
                voted_ids = set()

            try:
                captions = await self.caption_service.get_public_captions()
            except StoreError as e:
                return GetRandomUnvotedCaptionResponse(error=str(e))

            if not captions:
                return GetRandomUnvotedCaptionResponse(
                    error=(
                        "No public captions available. This might be due to "
                        "Row Level Security policies restricting access."
                    )
                )

            caption = self.caption_service.choose_unvoted(captions, voted_ids)
            if caption is None:
                return GetRandomUnvotedCaptionResponse(
                    error=f"You've voted on all {len(captions)} available captions!"
                )

            try:
                vote_score = await self.vote_service.get_vote_score(caption.id)
            except StoreError as e:
                logfire.warn(
                    "Vote score unavailable", caption_id=str(caption.id), error=str(e)
                )
                vote_score = 0

            logfire.info(
                "Random caption selected",
                caption_id=str(caption.id),
                eligible=len(captions),
            )

            return GetRandomUnvotedCaptionResponse(
                caption=to_caption_item(caption, vote_score, user_vote=None)
            )
