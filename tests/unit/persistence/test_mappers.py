"""Unit tests for row mappers."""

from datetime import datetime, timezone
from uuid import uuid4

from humor.domain.value import VoteValue
from humor.persistence.mappers import row_to_caption, row_to_vote, vote_to_dict


def _caption_row(**overrides):
    row = {
        "id": str(uuid4()),
        "created_datetime_utc": datetime.now(timezone.utc),
        "content": "Monday again",
        "is_public": True,
        "profile_id": uuid4(),
        "image_id": uuid4(),
        "is_featured": None,
        "like_count": None,
        "author_id": None,
        "author_first_name": None,
        "author_last_name": None,
        "author_email": None,
        "image_ref": None,
        "image_url": None,
        "image_description": None,
    }
    row.update(overrides)
    return row


class TestRowToCaption:
    """Tests for row_to_caption."""

    def test_outer_join_misses_become_none(self):
        """No joined author or image gives None, never an empty list."""
        caption = row_to_caption(_caption_row())

        assert caption.author is None
        assert caption.image is None
        assert caption.is_featured is False
        assert caption.like_count == 0

    def test_joined_columns_collapse_to_single_objects(self):
        """Prefixed join columns become one author and one image."""
        caption = row_to_caption(
            _caption_row(
                author_id=uuid4(),
                author_first_name="Ada",
                author_email="ada@example.com",
                image_ref=uuid4(),
                image_url="https://img.example.com/2.jpg",
                image_description="A lighthouse",
                like_count=7,
            )
        )

        assert caption.author.first_name == "Ada"
        assert caption.author.last_name is None
        assert caption.image.url == "https://img.example.com/2.jpg"
        assert caption.like_count == 7


class TestVoteMapping:
    """Tests for vote row conversions."""

    def test_vote_value_stored_as_plain_int(self):
        row = {
            "id": uuid4(),
            "caption_id": uuid4(),
            "profile_id": uuid4(),
            "vote_value": -1,
            "created_datetime_utc": datetime.now(timezone.utc),
            "modified_datetime_utc": None,
        }

        vote = row_to_vote(row)
        data = vote_to_dict(vote)

        assert vote.vote_value is VoteValue.DOWN
        assert type(data["vote_value"]) is int
        assert data["vote_value"] == -1
