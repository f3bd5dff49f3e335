"""Unit tests for GetRandomUnvotedCaptionUseCase."""

import pytest
from sqlalchemy.exc import SQLAlchemyError

from humor.application.usecase.caption import (
    GetRandomUnvotedCaptionRequest,
    GetRandomUnvotedCaptionUseCase,
)
from humor.domain.repository import CaptionRepository, CaptionVoteRepository
from humor.domain.value import ProfileId, VoteValue
from tests.conftest import make_caption, make_profile, make_session, make_vote
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetRandomUnvotedCaptionUseCase:
    """Tests for GetRandomUnvotedCaptionUseCase."""

    @pytest.mark.asyncio
    async def test_returns_only_unvoted_caption(self, unit_env):
        """With one caption left unvoted, that caption is always chosen."""
        # Arrange
        use_case = await unit_env.get(GetRandomUnvotedCaptionUseCase)
        caption_repo = await unit_env.get(CaptionRepository)
        vote_repo = await unit_env.get(CaptionVoteRepository)
        profile = make_profile()
        voted = [caption_repo.add(make_caption(f"voted {i}")) for i in range(3)]
        fresh = caption_repo.add(make_caption("fresh"))
        for caption in voted:
            await vote_repo.save(make_vote(caption.id, profile.id))
        request = GetRandomUnvotedCaptionRequest(session=make_session(profile))

        # Act
        responses = [await use_case.execute(request) for _ in range(10)]

        # Assert
        assert all(r.error is None for r in responses)
        assert {r.caption.id for r in responses} == {str(fresh.id)}

    @pytest.mark.asyncio
    async def test_caption_carries_score_and_no_user_vote(self, unit_env):
        """The chosen caption has its current score and no caller vote."""
        use_case = await unit_env.get(GetRandomUnvotedCaptionUseCase)
        caption_repo = await unit_env.get(CaptionRepository)
        vote_repo = await unit_env.get(CaptionVoteRepository)
        caption = caption_repo.add(make_caption(like_count=4))
        for _ in range(3):
            await vote_repo.save(make_vote(caption.id, ProfileId(make_profile().id)))
        await vote_repo.save(
            make_vote(caption.id, make_profile().id, VoteValue.DOWN)
        )

        response = await use_case.execute(
            GetRandomUnvotedCaptionRequest(session=make_session(make_profile()))
        )

        assert response.caption.vote_score == 2
        assert response.caption.like_count == 4
        assert response.caption.user_vote is None
        assert response.caption.author.first_name == "Ada"

    @pytest.mark.asyncio
    async def test_all_voted_reports_count(self, unit_env):
        """Having voted on everything names how many captions there were."""
        use_case = await unit_env.get(GetRandomUnvotedCaptionUseCase)
        caption_repo = await unit_env.get(CaptionRepository)
        vote_repo = await unit_env.get(CaptionVoteRepository)
        profile = make_profile()
        for i in range(3):
            caption = caption_repo.add(make_caption(f"caption {i}"))
            await vote_repo.save(make_vote(caption.id, profile.id))

        response = await use_case.execute(
            GetRandomUnvotedCaptionRequest(session=make_session(profile))
        )

        assert response.caption is None
        assert response.error == "You've voted on all 3 available captions!"

    @pytest.mark.asyncio
    async def test_no_public_captions(self, unit_env):
        """An empty public set hints at row-level security."""
        use_case = await unit_env.get(GetRandomUnvotedCaptionUseCase)
        caption_repo = await unit_env.get(CaptionRepository)
        caption_repo.add(make_caption(is_public=False))

        response = await use_case.execute(
            GetRandomUnvotedCaptionRequest(session=make_session(make_profile()))
        )

        assert response.caption is None
        assert response.error.startswith("No public captions available.")

    @pytest.mark.asyncio
    async def test_logged_out(self, unit_env):
        """No session, no caption."""
        use_case = await unit_env.get(GetRandomUnvotedCaptionUseCase)

        response = await use_case.execute(GetRandomUnvotedCaptionRequest())

        assert response.error == "You must be logged in"

    @pytest.mark.asyncio
    async def test_voted_lookup_failure_still_picks(self, unit_env, monkeypatch):
        """If voted captions cannot be read, any public caption may be chosen."""
        use_case = await unit_env.get(GetRandomUnvotedCaptionUseCase)
        caption_repo = await unit_env.get(CaptionRepository)
        vote_repo = await unit_env.get(CaptionVoteRepository)
        caption = caption_repo.add(make_caption())

        async def _fail(profile_id):
            raise SQLAlchemyError("boom")

        monkeypatch.setattr(vote_repo, "find_caption_ids_by_profile", _fail)

        response = await use_case.execute(
            GetRandomUnvotedCaptionRequest(session=make_session(make_profile()))
        )

        assert response.caption.id == str(caption.id)

    @pytest.mark.asyncio
    async def test_caption_query_failure_returns_message(self, unit_env, monkeypatch):
        """A failed caption query returns the store message."""
        use_case = await unit_env.get(GetRandomUnvotedCaptionUseCase)
        caption_repo = await unit_env.get(CaptionRepository)

        async def _fail():
            raise SQLAlchemyError("relation does not exist")

        monkeypatch.setattr(caption_repo, "find_public", _fail)

        response = await use_case.execute(
            GetRandomUnvotedCaptionRequest(session=make_session(make_profile()))
        )

        assert response.caption is None
        assert response.error == "Database error: relation does not exist"
