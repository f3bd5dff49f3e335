"""Caption domain service."""

import random
from typing import Collection, Sequence

import logfire
from sqlalchemy.exc import SQLAlchemyError

from humor.domain.error import NotFoundError, StoreError
from humor.domain.model import Caption
from humor.domain.repository import CaptionRepository
from humor.domain.value import CaptionId

from .base import Service


class CaptionService(Service):
    """Domain service for reading captions."""

    def __init__(
        self, caption_repository: CaptionRepository, rng: random.Random | None = None
    ) -> None:
        """Initialize caption service.

        Args:
            caption_repository: Caption repository
            rng: Random source for caption selection (seedable in tests)
        """
        self.caption_repository = caption_repository
        self.rng = rng or random.Random()

    async def get_public_captions(self) -> list[Caption]:
        """Load every public caption.

        Raises:
            StoreError: If the store query fails
        """
        with logfire.span("caption_service.get_public_captions"):
            try:
                captions = await self.caption_repository.find_public()
            except SQLAlchemyError as e:
                logfire.error("Error fetching captions", error=str(e))
                raise StoreError(f"Database error: {e}") from e
            logfire.info("Public captions loaded", count=len(captions))
            return captions

    async def get_caption(self, caption_id: CaptionId) -> Caption:
        """Get a caption by ID.

        Raises:
            NotFoundError: If no caption has this ID
            StoreError: If the store query fails
        """
        with logfire.span("caption_service.get_caption", caption_id=str(caption_id)):
            try:
                caption = await self.caption_repository.find_by_id(caption_id)
            except SQLAlchemyError as e:
                logfire.error(
                    "Error fetching caption", caption_id=str(caption_id), error=str(e)
                )
                raise StoreError(f"Database error: {e}") from e
            if not caption:
                logfire.warn("Caption not found", caption_id=str(caption_id))
                raise NotFoundError("Caption", str(caption_id))
            return caption

    async def get_captions(
        self, caption_ids: Sequence[CaptionId]
    ) -> dict[CaptionId, Caption]:
        """Load several captions keyed by ID.

        Missing captions are simply absent from the result.

        Raises:
            StoreError: If the store query fails
        """
        if not caption_ids:
            return {}
        try:
            captions = await self.caption_repository.find_by_ids(caption_ids)
        except SQLAlchemyError as e:
            logfire.error("Error fetching captions by id", error=str(e))
            raise StoreError(f"Database error: {e}") from e
        return {caption.id: caption for caption in captions}

    def choose_unvoted(
        self, captions: Sequence[Caption], voted_ids: Collection[CaptionId]
    ) -> Caption | None:
        """Pick a caption uniformly at random among those not voted on.

        Args:
            captions: Eligible captions
            voted_ids: Captions the viewer already voted on

        Returns:
            A caption whose ID is not in ``voted_ids``, or None if none is left
        """
        unvoted = [caption for caption in captions if caption.id not in voted_ids]
        if not unvoted:
            return None
        return self.rng.choice(unvoted)
