"""Caption example domain service."""

import logfire
from sqlalchemy.exc import SQLAlchemyError

from humor.domain.error import StoreError
from humor.domain.model import CaptionExample
from humor.domain.repository import CaptionExampleRepository

from .base import Service


class CaptionExampleService(Service):
    """Domain service for curated caption examples."""

    def __init__(self, caption_example_repository: CaptionExampleRepository) -> None:
        self.caption_example_repository = caption_example_repository

    async def list_examples(self) -> list[CaptionExample]:
        """List all caption examples ordered by ID.

        Raises:
            StoreError: If the store query fails
        """
        try:
            examples = await self.caption_example_repository.find_all()
        except SQLAlchemyError as e:
            logfire.error("Error fetching caption examples", error=str(e))
            raise StoreError(
                "Could not fetch caption examples. Please try again later."
            ) from e
        logfire.info("Caption examples loaded", count=len(examples))
        return examples
