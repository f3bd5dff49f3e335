"""Unit tests for CaptionService."""

import random
from uuid import uuid4

import pytest
from sqlalchemy.exc import SQLAlchemyError

from humor.domain.error import NotFoundError, StoreError
from humor.domain.repository import CaptionRepository
from humor.domain.service import CaptionService
from humor.domain.value import CaptionId
from tests.conftest import make_caption
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetPublicCaptions:
    """Tests for get_public_captions."""

    @pytest.mark.asyncio
    async def test_only_public_captions_are_returned(self, unit_env):
        """Private captions are never offered."""
        # Arrange
        caption_service = await unit_env.get(CaptionService)
        caption_repo = await unit_env.get(CaptionRepository)
        public = caption_repo.add(make_caption("public one"))
        caption_repo.add(make_caption("private one", is_public=False))

        # Act
        captions = await caption_service.get_public_captions()

        # Assert
        assert [c.id for c in captions] == [public.id]

    @pytest.mark.asyncio
    async def test_store_failure_raises_store_error(self, unit_env, monkeypatch):
        """A failed query surfaces its message with the database prefix."""
        caption_service = await unit_env.get(CaptionService)
        caption_repo = await unit_env.get(CaptionRepository)

        async def _fail():
            raise SQLAlchemyError("permission denied for table captions")

        monkeypatch.setattr(caption_repo, "find_public", _fail)

        with pytest.raises(StoreError) as exc_info:
            await caption_service.get_public_captions()

        assert str(exc_info.value) == (
            "Database error: permission denied for table captions"
        )


class TestGetCaption:
    """Tests for get_caption and get_captions."""

    @pytest.mark.asyncio
    async def test_get_caption_returns_joined_author_and_image(self, unit_env):
        """The caption comes back with its author and image resolved."""
        caption_service = await unit_env.get(CaptionService)
        caption_repo = await unit_env.get(CaptionRepository)
        seeded = caption_repo.add(make_caption())

        caption = await caption_service.get_caption(seeded.id)

        assert caption.author.first_name == "Ada"
        assert caption.image.url == "https://img.example.com/1.jpg"

    @pytest.mark.asyncio
    async def test_get_caption_missing_raises_not_found(self, unit_env):
        """Unknown IDs raise NotFoundError."""
        caption_service = await unit_env.get(CaptionService)

        with pytest.raises(NotFoundError):
            await caption_service.get_caption(CaptionId(uuid4()))

    @pytest.mark.asyncio
    async def test_get_captions_skips_missing(self, unit_env):
        """Only captions that exist are keyed in the result."""
        caption_service = await unit_env.get(CaptionService)
        caption_repo = await unit_env.get(CaptionRepository)
        seeded = caption_repo.add(make_caption())

        captions = await caption_service.get_captions([seeded.id, CaptionId(uuid4())])

        assert list(captions) == [seeded.id]

    @pytest.mark.asyncio
    async def test_get_captions_empty_input(self, unit_env):
        """No IDs means no query and an empty result."""
        caption_service = await unit_env.get(CaptionService)

        assert await caption_service.get_captions([]) == {}


class TestChooseUnvoted:
    """Tests for choose_unvoted."""

    def test_never_returns_a_voted_caption(self):
        """Over many draws only unvoted captions are chosen."""
        # Arrange
        captions = [make_caption(f"caption {i}") for i in range(6)]
        voted = {captions[0].id, captions[2].id, captions[4].id}
        service = CaptionService(caption_repository=None, rng=random.Random(7))

        # Act
        chosen = {service.choose_unvoted(captions, voted).id for _ in range(200)}

        # Assert
        assert chosen == {captions[1].id, captions[3].id, captions[5].id}

    def test_returns_none_when_everything_is_voted(self):
        """No unvoted caption left gives None."""
        captions = [make_caption() for _ in range(3)]
        service = CaptionService(caption_repository=None, rng=random.Random(0))

        assert service.choose_unvoted(captions, {c.id for c in captions}) is None

    def test_returns_none_for_no_captions(self):
        """An empty candidate list gives None."""
        service = CaptionService(caption_repository=None, rng=random.Random(0))

        assert service.choose_unvoted([], set()) is None

    def test_same_seed_gives_same_choice(self):
        """Selection is reproducible with a seeded random source."""
        captions = [make_caption() for _ in range(10)]

        first = CaptionService(None, rng=random.Random(42)).choose_unvoted(captions, set())
        second = CaptionService(None, rng=random.Random(42)).choose_unvoted(
            captions, set()
        )

        assert first.id == second.id
