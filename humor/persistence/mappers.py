"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.

Caption queries outer-join the owning profile and the image. Joined columns
arrive prefixed (``author_*``, ``image_*``) and are collapsed here into an
optional association, so no caller ever sees a list-shaped join.
"""

from typing import Any, Dict
from uuid import UUID

from humor.domain.model import (
    Caption,
    CaptionAuthor,
    CaptionExample,
    CaptionImage,
    CaptionVote,
    Profile,
)
from humor.domain.value import (
    CaptionExampleId,
    CaptionId,
    CaptionVoteId,
    ImageId,
    ProfileId,
    VoteValue,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model."""
    return Profile(
        id=ProfileId(_uuid(row["id"])),
        email=row.get("email"),
        first_name=row.get("first_name"),
        last_name=row.get("last_name"),
        created_datetime_utc=row["created_datetime_utc"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict."""
    return profile.model_dump()


def row_to_caption(row: Dict[str, Any]) -> Caption:
    """Convert a caption row, with its joined author and image, to Caption.

    Args:
        row: Database row as dict; ``author_id`` / ``image_ref`` are None
            when the outer join found nothing

    Returns:
        Caption domain model
    """
    author = None
    if row.get("author_id") is not None:
        author = CaptionAuthor(
            first_name=row.get("author_first_name"),
            last_name=row.get("author_last_name"),
            email=row.get("author_email"),
        )

    image = None
    if row.get("image_ref") is not None:
        image = CaptionImage(
            url=row.get("image_url"),
            image_description=row.get("image_description"),
        )

    return Caption(
        id=CaptionId(_uuid(row["id"])),
        created_datetime_utc=row["created_datetime_utc"],
        content=row.get("content"),
        is_public=row["is_public"],
        profile_id=ProfileId(_uuid(row["profile_id"])),
        image_id=ImageId(_uuid(row["image_id"])),
        is_featured=row.get("is_featured") or False,
        like_count=row.get("like_count") or 0,
        author=author,
        image=image,
    )


def row_to_vote(row: Dict[str, Any]) -> CaptionVote:
    """Convert database row to CaptionVote domain model."""
    return CaptionVote(
        id=CaptionVoteId(_uuid(row["id"])),
        caption_id=CaptionId(_uuid(row["caption_id"])),
        profile_id=ProfileId(_uuid(row["profile_id"])),
        vote_value=VoteValue(row["vote_value"]),
        created_datetime_utc=row["created_datetime_utc"],
        modified_datetime_utc=row.get("modified_datetime_utc"),
    )


def vote_to_dict(vote: CaptionVote) -> Dict[str, Any]:
    """Convert CaptionVote domain model to database dict."""
    data = vote.model_dump()
    data["vote_value"] = int(vote.vote_value)
    return data


def row_to_caption_example(row: Dict[str, Any]) -> CaptionExample:
    """Convert database row to CaptionExample domain model."""
    return CaptionExample(
        id=CaptionExampleId(row["id"]),
        created_datetime_utc=row["created_datetime_utc"],
        modified_datetime_utc=row.get("modified_datetime_utc"),
        image_description=row["image_description"],
        caption=row["caption"],
        explanation=row["explanation"],
        priority=row.get("priority") or 0,
        image_id=ImageId(_uuid(row["image_id"])) if row.get("image_id") else None,
    )
