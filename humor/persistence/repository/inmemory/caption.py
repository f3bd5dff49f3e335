"""In-memory caption repository for testing."""

from typing import Optional, Sequence

from humor.domain.model import Caption
from humor.domain.repository import CaptionRepository
from humor.domain.value import CaptionId


class InMemoryCaptionRepository(CaptionRepository):
    """In-memory implementation of CaptionRepository for testing."""

    def __init__(self) -> None:
        self._captions: dict[CaptionId, Caption] = {}

    def add(self, caption: Caption) -> Caption:
        """Seed a caption (captions are read-only through the interface)."""
        self._captions[caption.id] = caption
        return caption

    async def find_by_id(self, caption_id: CaptionId) -> Optional[Caption]:
        """Find a caption by ID."""
        return self._captions.get(caption_id)

    async def find_public(self) -> list[Caption]:
        """Find every public caption."""
        return [c for c in self._captions.values() if c.is_public]

    async def find_by_ids(self, caption_ids: Sequence[CaptionId]) -> list[Caption]:
        """Find several captions at once."""
        wanted = set(caption_ids)
        return [c for c in self._captions.values() if c.id in wanted]
