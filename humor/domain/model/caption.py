"""Caption entity and its one-to-one associations.

The author and image of a caption come back from the store as joined
rows. They are resolved once, in the persistence mappers, into optional
typed values so callers never deal with list-shaped joins.
"""

from datetime import datetime
from typing import Optional

from humor.domain.model.common import DomainModel
from humor.domain.value import CaptionId, ImageId, ProfileId


class CaptionAuthor(DomainModel):
    """Display fields of the profile that owns a caption."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None


class CaptionImage(DomainModel):
    """Image a caption was written for."""

    url: Optional[str] = None
    image_description: Optional[str] = None


class Caption(DomainModel):
    """Caption entity.

    Immutable apart from moderation fields, which this service never writes.
    ``like_count`` is an independent counter kept by the store and is not
    derived from votes.
    """

    id: CaptionId
    created_datetime_utc: datetime
    content: Optional[str] = None
    is_public: bool
    profile_id: ProfileId
    image_id: ImageId
    is_featured: bool = False
    like_count: int = 0
    author: Optional[CaptionAuthor] = None
    image: Optional[CaptionImage] = None

