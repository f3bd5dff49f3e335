"""Unit tests for the displayed vote transition table."""

import random

import pytest

from humor.domain.model import ClientVoteState, next_vote_state
from humor.domain.value import VoteValue

UP = VoteValue.UP
DOWN = VoteValue.DOWN


class TestNextVoteState:
    """Tests for next_vote_state."""

    @pytest.mark.parametrize("action", [UP, DOWN])
    def test_first_vote_sets_vote_and_adds_its_value(self, action):
        """A vote on an unvoted caption shows that vote and moves score by it."""
        # Arrange
        state = ClientVoteState(vote=None, score=5)

        # Act
        transition = next_vote_state(state, action)

        # Assert
        assert transition.current.vote == action
        assert transition.current.score == 5 + int(action)
        assert transition.delta == int(action)

    @pytest.mark.parametrize("action", [UP, DOWN])
    def test_same_vote_withdraws(self, action):
        """Repeating the current vote clears it and takes its value back."""
        state = ClientVoteState(vote=action, score=5)

        transition = next_vote_state(state, action)

        assert transition.current.vote is None
        assert transition.current.score == 5 - int(action)
        assert transition.delta == -int(action)

    @pytest.mark.parametrize("action", [UP, DOWN])
    def test_opposite_vote_swings_by_twice_its_value(self, action):
        """Switching sides moves the score by two."""
        state = ClientVoteState(vote=action.opposite, score=5)

        transition = next_vote_state(state, action)

        assert transition.current.vote == action
        assert transition.current.score == 5 + 2 * int(action)
        assert transition.delta == 2 * int(action)

    def test_upvoted_then_downvote(self):
        """(+1, 5) with -1 gives (-1, 3)."""
        transition = next_vote_state(ClientVoteState(vote=UP, score=5), DOWN)

        assert transition.current == ClientVoteState(vote=DOWN, score=3)
        assert transition.delta == -2

    def test_unvoted_then_upvote(self):
        """(None, 5) with +1 gives (+1, 6)."""
        transition = next_vote_state(ClientVoteState(vote=None, score=5), UP)

        assert transition.current == ClientVoteState(vote=UP, score=6)
        assert transition.delta == 1

    def test_upvoted_then_upvote(self):
        """(+1, 5) with +1 gives (None, 4)."""
        transition = next_vote_state(ClientVoteState(vote=UP, score=5), UP)

        assert transition.current == ClientVoteState(vote=None, score=4)
        assert transition.delta == -1

    def test_transition_keeps_previous_state(self):
        """The transition carries the exact state it started from."""
        state = ClientVoteState(vote=DOWN, score=-2)

        transition = next_vote_state(state, UP)

        assert transition.previous == state

    def test_accepts_plain_int_action(self):
        """Raw 1 / -1 are accepted as actions."""
        transition = next_vote_state(ClientVoteState(), -1)

        assert transition.current.vote == DOWN


class TestVoteSequences:
    """Properties over sequences of vote actions."""

    @pytest.mark.parametrize("action", [UP, DOWN])
    @pytest.mark.parametrize("repeats", range(1, 8))
    def test_repeated_identical_votes_alternate(self, action, repeats):
        """Odd repeats leave the vote set, even repeats leave it cleared."""
        state = ClientVoteState(vote=None, score=0)

        for _ in range(repeats):
            state = next_vote_state(state, action).current

        expected = action if repeats % 2 == 1 else None
        assert state.vote == expected
        assert state.score == (int(action) if repeats % 2 == 1 else 0)

    @pytest.mark.parametrize("seed", range(10))
    def test_score_is_net_sum_of_deltas(self, seed):
        """Final score equals the start score plus every applied delta."""
        rng = random.Random(seed)
        state = ClientVoteState(vote=None, score=10)
        deltas = []

        for _ in range(50):
            transition = next_vote_state(state, rng.choice([UP, DOWN]))
            deltas.append(transition.delta)
            state = transition.current

        assert state.score == 10 + sum(deltas)

    @pytest.mark.parametrize("seed", range(10))
    def test_score_tracks_displayed_vote(self, seed):
        """From an unvoted start, the score offset always equals the shown vote."""
        rng = random.Random(seed)
        state = ClientVoteState(vote=None, score=3)

        for _ in range(30):
            state = next_vote_state(state, rng.choice([UP, DOWN])).current
            assert state.score - 3 == (int(state.vote) if state.vote else 0)
