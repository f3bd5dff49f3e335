"""Unit tests for GetVotedHistoryUseCase."""

import pytest
from sqlalchemy.exc import SQLAlchemyError

from humor.application.usecase.caption import (
    GetVotedHistoryRequest,
    GetVotedHistoryUseCase,
)
from humor.domain.repository import CaptionRepository, CaptionVoteRepository
from humor.domain.value import VoteValue
from tests.conftest import make_caption, make_profile, make_session, make_vote
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed_history(unit_env, profile, count):
    """Vote on ``count`` captions, newest vote first in the returned list."""
    caption_repo = await unit_env.get(CaptionRepository)
    vote_repo = await unit_env.get(CaptionVoteRepository)
    captions = []
    for minutes_ago in range(count):
        caption = caption_repo.add(make_caption(f"caption {minutes_ago}"))
        value = VoteValue.UP if minutes_ago % 2 == 0 else VoteValue.DOWN
        await vote_repo.save(
            make_vote(caption.id, profile.id, value, minutes_ago=minutes_ago)
        )
        captions.append(caption)
    return captions


class TestGetVotedHistoryUseCase:
    """Tests for GetVotedHistoryUseCase."""

    @pytest.mark.asyncio
    async def test_first_page_newest_first(self, unit_env):
        """Page 1 holds the most recent votes with the caller's vote attached."""
        # Arrange
        use_case = await unit_env.get(GetVotedHistoryUseCase)
        profile = make_profile()
        captions = await _seed_history(unit_env, profile, 5)

        # Act
        response = await use_case.execute(
            GetVotedHistoryRequest(session=make_session(profile), page=1, per_page=2)
        )

        # Assert
        assert response.error is None
        assert [c.id for c in response.captions] == [
            str(captions[0].id),
            str(captions[1].id),
        ]
        assert [c.user_vote for c in response.captions] == [
            VoteValue.UP,
            VoteValue.DOWN,
        ]
        assert response.captions[1].vote_score == -1
        assert response.total_count == 5
        assert response.current_page == 1
        assert response.total_pages == 3

    @pytest.mark.asyncio
    async def test_last_page_is_partial(self, unit_env):
        """The last page holds the remainder."""
        use_case = await unit_env.get(GetVotedHistoryUseCase)
        profile = make_profile()
        captions = await _seed_history(unit_env, profile, 5)

        response = await use_case.execute(
            GetVotedHistoryRequest(session=make_session(profile), page=3, per_page=2)
        )

        assert [c.id for c in response.captions] == [str(captions[4].id)]
        assert response.current_page == 3

    @pytest.mark.asyncio
    async def test_no_votes(self, unit_env):
        """Nobody-voted-yet echoes the requested page with zero totals."""
        use_case = await unit_env.get(GetVotedHistoryUseCase)

        response = await use_case.execute(
            GetVotedHistoryRequest(session=make_session(make_profile()), page=2)
        )

        assert response.captions == []
        assert response.total_count == 0
        assert response.total_pages == 0
        assert response.current_page == 2
        assert response.error == "You haven't voted on any captions yet!"

    @pytest.mark.asyncio
    async def test_page_size_is_capped(self, unit_env):
        """A huge per_page is clamped to the configured maximum."""
        use_case = await unit_env.get(GetVotedHistoryUseCase)
        profile = make_profile()
        await _seed_history(unit_env, profile, 3)
        use_case.voting_settings = use_case.voting_settings.model_copy(
            update={"max_page_size": 2}
        )

        response = await use_case.execute(
            GetVotedHistoryRequest(session=make_session(profile), per_page=50)
        )

        assert len(response.captions) == 2
        assert response.total_pages == 2

    @pytest.mark.asyncio
    async def test_default_page_size(self, unit_env):
        """Without per_page the configured page size applies."""
        use_case = await unit_env.get(GetVotedHistoryUseCase)
        profile = make_profile()
        await _seed_history(unit_env, profile, 25)

        response = await use_case.execute(
            GetVotedHistoryRequest(session=make_session(profile))
        )

        assert len(response.captions) == 20
        assert response.total_pages == 2

    @pytest.mark.asyncio
    async def test_logged_out(self, unit_env):
        """No session gives the login message on page 1."""
        use_case = await unit_env.get(GetVotedHistoryUseCase)

        response = await use_case.execute(GetVotedHistoryRequest(page=4))

        assert response.error == "You must be logged in"
        assert response.current_page == 1

    @pytest.mark.asyncio
    async def test_store_failure(self, unit_env, monkeypatch):
        """A failed query reports the history failure message."""
        use_case = await unit_env.get(GetVotedHistoryUseCase)
        vote_repo = await unit_env.get(CaptionVoteRepository)

        async def _fail(profile_id):
            raise SQLAlchemyError("boom")

        monkeypatch.setattr(vote_repo, "count_by_profile", _fail)

        response = await use_case.execute(
            GetVotedHistoryRequest(session=make_session(make_profile()), page=2)
        )

        assert response.error == "Failed to fetch voting history"
        assert response.current_page == 1
        assert response.captions == []
