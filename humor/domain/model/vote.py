"""Caption vote entity.

Each profile holds at most one vote per caption (unique constraint in the
store). Voting the same value again withdraws the vote by deleting it.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from humor.domain.model.common import DomainModel
from humor.domain.value import CaptionId, CaptionVoteId, ProfileId, VoteValue


class CaptionVote(DomainModel):
    """Up or down vote on a caption."""

    id: CaptionVoteId
    caption_id: CaptionId
    profile_id: ProfileId
    vote_value: VoteValue
    created_datetime_utc: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    modified_datetime_utc: Optional[datetime] = None
