"""Get voted caption history use case."""

import math

import logfire
from pydantic import BaseModel, Field

from humor.config import VotingSettings
from humor.domain.error import StoreError
from humor.domain.model import AuthSession
from humor.domain.service import CaptionService, VoteService

from ..base import BaseUseCase
from .common import CaptionItem, to_caption_item


class GetVotedHistoryRequest(BaseModel):
    """Get voted caption history request."""

    session: AuthSession | None = None
    page: int = Field(default=1, ge=1)
    per_page: int | None = Field(default=None, ge=1)  # None uses the configured size


class GetVotedHistoryResponse(BaseModel):
    """Get voted caption history response."""

    captions: list[CaptionItem]
    total_count: int
    current_page: int
    total_pages: int
    error: str | None = None


class GetVotedHistoryUseCase(
    BaseUseCase[GetVotedHistoryRequest, GetVotedHistoryResponse]
):
    """Use case for paging through the captions the caller voted on."""

    def __init__(
        self,
        caption_service: CaptionService,
        vote_service: VoteService,
        voting_settings: VotingSettings,
    ) -> None:
        """Initialize get voted history use case.

        Args:
            caption_service: Caption domain service
            vote_service: Vote domain service
            voting_settings: Page size defaults and limits
        """
        self.caption_service = caption_service
        self.vote_service = vote_service
        self.voting_settings = voting_settings

    async def execute(self, request: GetVotedHistoryRequest) -> GetVotedHistoryResponse:
        """Execute voted history flow.

        Votes are ordered newest first and windowed with
        ``offset = (page - 1) * per_page``. Each item carries the caption's
        current score and the vote the caller cast.

        Args:
            request: Request with session and page parameters

        Returns:
            One page of voted captions with totals, or an error message
        """
        if request.session is None:
            return self._failure("You must be logged in")

        per_page = min(
            request.per_page or self.voting_settings.history_page_size,
            self.voting_settings.max_page_size,
        )

        with logfire.span(
            "get_voted_history.execute",
            user_id=str(request.session.user_id),
            page=request.page,
            per_page=per_page,
        ):
            try:
                votes, total = await self.vote_service.get_history_page(
                    request.session.user_id, request.page, per_page
                )
                if not votes:
                    return GetVotedHistoryResponse(
                        captions=[],
                        total_count=0,
                        current_page=request.page,
                        total_pages=0,
                        error="You haven't voted on any captions yet!",
                    )

                captions = await self.caption_service.get_captions(
                    [vote.caption_id for vote in votes]
                )

                items = []
                for vote in votes:
                    caption = captions.get(vote.caption_id)
                    if caption is None:
                        continue
                    vote_score = await self.vote_service.get_vote_score(caption.id)
                    items.append(to_caption_item(caption, vote_score, vote.vote_value))
            except StoreError as e:
                logfire.error("Error fetching voted history", error=str(e))
                return self._failure("Failed to fetch voting history")

            logfire.info("Voted history page loaded", count=len(items), total=total)

            return GetVotedHistoryResponse(
                captions=items,
                total_count=total,
                current_page=request.page,
                total_pages=math.ceil(total / per_page),
            )

    @staticmethod
    def _failure(message: str) -> GetVotedHistoryResponse:
        return GetVotedHistoryResponse(
            captions=[], total_count=0, current_page=1, total_pages=0, error=message
        )
