"""Profile entity.

A profile shares its id with the authenticated user. Captions and votes
reference profiles, never the identity provider's account directly.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from humor.domain.model.common import DomainModel
from humor.domain.value import ProfileId


class Profile(DomainModel):
    """User profile."""

    id: ProfileId
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    created_datetime_utc: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
