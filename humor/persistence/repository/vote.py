"""PostgreSQL implementation of CaptionVote repository.

Writes run inside a savepoint so a rejected write rolls back on its own
and leaves the request transaction usable.
"""

from datetime import datetime
from typing import List, Optional, Set

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from humor.domain.model import CaptionVote
from humor.domain.repository import CaptionVoteRepository
from humor.domain.value import CaptionId, CaptionVoteId, ProfileId, VoteValue
from humor.persistence.mappers import row_to_vote, vote_to_dict
from humor.persistence.tables import caption_votes_table


class PostgresCaptionVoteRepository(CaptionVoteRepository):
    """PostgreSQL implementation of CaptionVoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_caption_and_profile(
        self, caption_id: CaptionId, profile_id: ProfileId
    ) -> Optional[CaptionVote]:
        """Find a profile's vote on a caption."""
        stmt = select(caption_votes_table).where(
            and_(
                caption_votes_table.c.caption_id == caption_id,
                caption_votes_table.c.profile_id == profile_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_caption(self, caption_id: CaptionId) -> List[CaptionVote]:
        """Find all votes on a caption."""
        stmt = select(caption_votes_table).where(
            caption_votes_table.c.caption_id == caption_id
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def score_by_caption(self, caption_id: CaptionId) -> int:
        """Sum of vote values on a caption."""
        stmt = select(
            func.coalesce(func.sum(caption_votes_table.c.vote_value), 0)
        ).where(caption_votes_table.c.caption_id == caption_id)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def find_caption_ids_by_profile(self, profile_id: ProfileId) -> Set[CaptionId]:
        """IDs of every caption a profile has voted on."""
        stmt = select(caption_votes_table.c.caption_id).where(
            caption_votes_table.c.profile_id == profile_id
        )
        result = await self.session.execute(stmt)
        return {CaptionId(caption_id) for caption_id in result.scalars().all()}

    async def find_by_profile(
        self, profile_id: ProfileId, limit: int, offset: int
    ) -> List[CaptionVote]:
        """A page of a profile's votes, newest first."""
        stmt = (
            select(caption_votes_table)
            .where(caption_votes_table.c.profile_id == profile_id)
            .order_by(caption_votes_table.c.created_datetime_utc.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def count_by_profile(self, profile_id: ProfileId) -> int:
        """Count a profile's votes."""
        stmt = (
            select(func.count())
            .select_from(caption_votes_table)
            .where(caption_votes_table.c.profile_id == profile_id)
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def save(self, vote: CaptionVote) -> CaptionVote:
        """Insert a new vote."""
        stmt = insert(caption_votes_table).values(**vote_to_dict(vote))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return vote

    async def update_value(
        self, vote_id: CaptionVoteId, vote_value: VoteValue, modified_at: datetime
    ) -> CaptionVote:
        """Change the value of an existing vote in place."""
        stmt = (
            update(caption_votes_table)
            .where(caption_votes_table.c.id == vote_id)
            .values(vote_value=int(vote_value), modified_datetime_utc=modified_at)
            .returning(caption_votes_table)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            row = result.one()
        return row_to_vote(row._asdict())

    async def delete(self, vote_id: CaptionVoteId) -> None:
        """Delete a vote."""
        stmt = delete(caption_votes_table).where(caption_votes_table.c.id == vote_id)
        async with self.session.begin_nested():
            await self.session.execute(stmt)
