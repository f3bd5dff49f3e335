"""Caption repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from humor.domain.model.caption import Caption
from humor.domain.value import CaptionId


class CaptionRepository(ABC):
    """Repository for Caption entity.

    Captions are read-only from this service. Implementations resolve the
    author and image associations before returning.
    """

    @abstractmethod
    async def find_by_id(self, caption_id: CaptionId) -> Optional[Caption]:
        """Find a caption by ID.

        Args:
            caption_id: The caption's unique identifier

        Returns:
            The caption if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_public(self) -> List[Caption]:
        """Find every caption with ``is_public`` set.

        Returns:
            All public captions, in store order
        """
        pass

    @abstractmethod
    async def find_by_ids(self, caption_ids: Sequence[CaptionId]) -> List[Caption]:
        """Find several captions at once (batch query).

        Args:
            caption_ids: Caption IDs to load

        Returns:
            The captions that exist, in no particular order
        """
        pass
