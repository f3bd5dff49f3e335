"""Displayed vote state and its transition table.

The state a viewer sees for one caption is their own vote (or none) and the
caption's score. A vote action moves it as follows:

    current  action  next   score delta
    None     a       a      +a
    a        a       None   -a
    -a       a       a      +2a

Voting the same value twice withdraws the vote rather than reinforcing it.
"""

from typing import Optional

from humor.domain.model.common import DomainModel
from humor.domain.value import VoteValue


class ClientVoteState(DomainModel):
    """Vote and score as currently displayed for a caption."""

    vote: Optional[VoteValue] = None
    score: int = 0


class VoteTransition(DomainModel):
    """Result of applying one vote action to a displayed state."""

    previous: ClientVoteState
    current: ClientVoteState
    delta: int


def next_vote_state(state: ClientVoteState, action: VoteValue) -> VoteTransition:
    """Apply a vote action to the displayed state.

    Args:
        state: State before the action
        action: Vote the user just cast

    Returns:
        The transition, holding the previous state for a later revert
    """
    action = VoteValue(action)

    if state.vote is None:
        next_vote, delta = action, int(action)
    elif state.vote == action.opposite:
        next_vote, delta = action, 2 * int(action)
    else:
        next_vote, delta = None, -int(action)

    return VoteTransition(
        previous=state,
        current=ClientVoteState(vote=next_vote, score=state.score + delta),
        delta=delta,
    )
