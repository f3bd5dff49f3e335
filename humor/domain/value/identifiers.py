"""Strongly typed identifiers for caption domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

ProfileId = NewType("ProfileId", UUID)
CaptionId = NewType("CaptionId", UUID)
CaptionVoteId = NewType("CaptionVoteId", UUID)
ImageId = NewType("ImageId", UUID)
CaptionExampleId = NewType("CaptionExampleId", int)
