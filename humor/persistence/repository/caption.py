"""PostgreSQL implementation of Caption repository."""

from typing import List, Optional, Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from humor.domain.model import Caption
from humor.domain.repository import CaptionRepository
from humor.domain.value import CaptionId
from humor.persistence.mappers import row_to_caption
from humor.persistence.tables import captions_table, images_table, profiles_table


def _caption_select() -> Select:
    """Captions outer-joined with their author profile and image."""
    return select(
        captions_table,
        profiles_table.c.id.label("author_id"),
        profiles_table.c.first_name.label("author_first_name"),
        profiles_table.c.last_name.label("author_last_name"),
        profiles_table.c.email.label("author_email"),
        images_table.c.id.label("image_ref"),
        images_table.c.url.label("image_url"),
        images_table.c.image_description.label("image_description"),
    ).select_from(
        captions_table.outerjoin(
            profiles_table, captions_table.c.profile_id == profiles_table.c.id
        ).outerjoin(images_table, captions_table.c.image_id == images_table.c.id)
    )


class PostgresCaptionRepository(CaptionRepository):
    """PostgreSQL implementation of CaptionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, caption_id: CaptionId) -> Optional[Caption]:
        """Find a caption by ID."""
        stmt = _caption_select().where(captions_table.c.id == caption_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_caption(row._asdict()) if row else None

    async def find_public(self) -> List[Caption]:
        """Find every public caption."""
        stmt = _caption_select().where(captions_table.c.is_public.is_(True))
        result = await self.session.execute(stmt)
        return [row_to_caption(row._asdict()) for row in result.fetchall()]

    async def find_by_ids(self, caption_ids: Sequence[CaptionId]) -> List[Caption]:
        """Find several captions at once (batch query)."""
        if not caption_ids:
            return []

        stmt = _caption_select().where(captions_table.c.id.in_(caption_ids))
        result = await self.session.execute(stmt)
        return [row_to_caption(row._asdict()) for row in result.fetchall()]
