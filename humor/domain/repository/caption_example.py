"""Caption example repository interface."""

from abc import ABC, abstractmethod
from typing import List

from humor.domain.model.caption_example import CaptionExample


class CaptionExampleRepository(ABC):
    """Read-only repository for caption examples."""

    @abstractmethod
    async def find_all(self) -> List[CaptionExample]:
        """Find all caption examples ordered by ID."""
        pass
