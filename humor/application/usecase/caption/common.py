"""Caption items shared by the caption use cases."""

from datetime import datetime

from pydantic import BaseModel

from humor.domain.model import Caption
from humor.domain.value import VoteValue


class CaptionAuthorInfo(BaseModel):
    """Caption author information for response."""

    first_name: str | None
    last_name: str | None
    email: str | None


class CaptionImageInfo(BaseModel):
    """Caption image information for response."""

    url: str | None
    image_description: str | None


class CaptionItem(BaseModel):
    """Caption with its vote score and the caller's vote."""

    id: str
    created_datetime_utc: datetime
    content: str | None
    is_public: bool
    profile_id: str
    image_id: str
    is_featured: bool
    like_count: int
    author: CaptionAuthorInfo | None
    image: CaptionImageInfo | None
    vote_score: int
    user_vote: VoteValue | None


def to_caption_item(
    caption: Caption, vote_score: int, user_vote: VoteValue | None
) -> CaptionItem:
    """Build the response item for a caption."""
    return CaptionItem(
        id=str(caption.id),
        created_datetime_utc=caption.created_datetime_utc,
        content=caption.content,
        is_public=caption.is_public,
        profile_id=str(caption.profile_id),
        image_id=str(caption.image_id),
        is_featured=caption.is_featured,
        like_count=caption.like_count,
        author=(
            CaptionAuthorInfo(**caption.author.model_dump())
            if caption.author
            else None
        ),
        image=CaptionImageInfo(**caption.image.model_dump()) if caption.image else None,
        vote_score=vote_score,
        user_vote=user_vote,
    )
