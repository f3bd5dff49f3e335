"""PostgreSQL implementation of CaptionExample repository."""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from humor.domain.model import CaptionExample
from humor.domain.repository import CaptionExampleRepository
from humor.persistence.mappers import row_to_caption_example
from humor.persistence.tables import caption_examples_table


class PostgresCaptionExampleRepository(CaptionExampleRepository):
    """PostgreSQL implementation of CaptionExampleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_all(self) -> List[CaptionExample]:
        """Find all caption examples ordered by ID."""
        stmt = select(caption_examples_table).order_by(caption_examples_table.c.id)
        result = await self.session.execute(stmt)
        return [row_to_caption_example(row._asdict()) for row in result.fetchall()]
