"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from humor.domain.model import (
    AuthSession,
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

# Console-only, nothing leaves the test process
logfire.configure(send_to_logfire=False, console=False)


def make_profile(
    profile_id: ProfileId | None = None, email: str | None = "voter@example.com"
) -> Profile:
    """Build a profile for tests."""
    return Profile(
        id=profile_id or ProfileId(uuid4()),
        email=email,
        first_name="Vera",
        last_name="Voter",
    )


def make_session(profile: Profile) -> AuthSession:
    """Build the session a logged-in profile would carry."""
    return AuthSession(user_id=profile.id, email=profile.email)


def make_caption(
    content: str = "When the coffee kicks in",
    is_public: bool = True,
    with_author: bool = True,
    with_image: bool = True,
    like_count: int = 0,
) -> Caption:
    """Build a caption for tests."""
    return Caption(
        id=CaptionId(uuid4()),
        created_datetime_utc=datetime.now(timezone.utc),
        content=content,
        is_public=is_public,
        profile_id=ProfileId(uuid4()),
        image_id=ImageId(uuid4()),
        like_count=like_count,
        author=(
            CaptionAuthor(first_name="Ada", last_name="Author", email="ada@example.com")
            if with_author
            else None
        ),
        image=(
            CaptionImage(url="https://img.example.com/1.jpg", image_description="A cat")
            if with_image
            else None
        ),
    )


def make_vote(
    caption_id: CaptionId,
    profile_id: ProfileId,
    vote_value: VoteValue = VoteValue.UP,
    minutes_ago: int = 0,
) -> CaptionVote:
    """Build a vote for tests; ``minutes_ago`` spaces out creation times."""
    return CaptionVote(
        id=CaptionVoteId(uuid4()),
        caption_id=caption_id,
        profile_id=profile_id,
        vote_value=vote_value,
        created_datetime_utc=datetime.now(timezone.utc) - timedelta(minutes=minutes_ago),
    )


def make_caption_example(example_id: int, priority: int = 0) -> CaptionExample:
    """Build a caption example for tests."""
    return CaptionExample(
        id=CaptionExampleId(example_id),
        created_datetime_utc=datetime.now(timezone.utc),
        image_description="A dog in a raincoat",
        caption=f"Example caption {example_id}",
        explanation="Plays on the contrast between the dog and the weather",
        priority=priority,
    )
