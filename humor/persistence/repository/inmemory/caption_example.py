"""In-memory caption example repository for testing."""

from humor.domain.model import CaptionExample
from humor.domain.repository import CaptionExampleRepository


class InMemoryCaptionExampleRepository(CaptionExampleRepository):
    """In-memory implementation of CaptionExampleRepository for testing."""

    def __init__(self) -> None:
        self._examples: list[CaptionExample] = []

    def add(self, example: CaptionExample) -> CaptionExample:
        """Seed a caption example."""
        self._examples.append(example)
        return example

    async def find_all(self) -> list[CaptionExample]:
        """Find all caption examples ordered by ID."""
        return sorted(self._examples, key=lambda e: e.id)
