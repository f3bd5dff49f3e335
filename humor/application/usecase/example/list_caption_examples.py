"""List caption examples use case."""

from datetime import datetime

from pydantic import BaseModel

from humor.domain.error import StoreError
from humor.domain.model import AuthSession
from humor.domain.service import CaptionExampleService


class CaptionExampleItem(BaseModel):
    """Caption example in response."""

    id: int
    created_datetime_utc: datetime
    modified_datetime_utc: datetime | None
    image_description: str
    caption: str
    explanation: str
    priority: int
    image_id: str | None


class ListCaptionExamplesRequest(BaseModel):
    """List caption examples request."""

    session: AuthSession | None = None


class ListCaptionExamplesResponse(BaseModel):
    """List caption examples response."""

    examples: list[CaptionExampleItem]
    error: str | None = None


class ListCaptionExamplesUseCase:
    """Use case for listing the curated caption examples."""

    def __init__(self, caption_example_service: CaptionExampleService) -> None:
        """Initialize list caption examples use case.

        Args:
            caption_example_service: Caption example domain service
        """
        self.caption_example_service = caption_example_service

    async def execute(
        self, request: ListCaptionExamplesRequest
    ) -> ListCaptionExamplesResponse:
        """Execute list caption examples flow.

        Args:
            request: Request with the caller's session

        Returns:
            All examples ordered by ID, or an error message
        """
        if request.session is None:
            return ListCaptionExamplesResponse(
                examples=[], error="You must be logged in"
            )

        try:
            examples = await self.caption_example_service.list_examples()
        except StoreError as e:
            return ListCaptionExamplesResponse(examples=[], error=str(e))

        return ListCaptionExamplesResponse(
            examples=[
                CaptionExampleItem(
                    id=example.id,
                    created_datetime_utc=example.created_datetime_utc,
                    modified_datetime_utc=example.modified_datetime_utc,
                    image_description=example.image_description,
                    caption=example.caption,
                    explanation=example.explanation,
                    priority=example.priority,
                    image_id=str(example.image_id) if example.image_id else None,
                )
                for example in examples
            ]
        )
