"""Domain model entities for captions and voting."""

from humor.domain.model.caption import (
    Caption,
    CaptionAuthor,
    CaptionImage,
)
from humor.domain.model.caption_example import CaptionExample
from humor.domain.model.profile import Profile
from humor.domain.model.session import AuthSession
from humor.domain.model.vote import CaptionVote
from humor.domain.model.vote_state import (
    ClientVoteState,
    VoteTransition,
    next_vote_state,
)

__all__ = [
    "AuthSession",
    "Caption",
    "CaptionAuthor",
    "CaptionExample",
    "CaptionImage",
    "CaptionVote",
    "ClientVoteState",
    "Profile",
    "VoteTransition",
    "next_vote_state",
]
