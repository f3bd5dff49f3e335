"""Fixtures for route tests: the app wired to a mocked container."""

import httpx
import pytest_asyncio

from humor.config import Settings
from humor.domain.repository import ProfileRepository
from humor.domain.service import JWTService
from humor.interface.api.app import create_app
from tests.conftest import make_profile
from tests.di import build_test_container


@pytest_asyncio.fixture
async def container():
    """Mocked container shared by the app and the test for seeding."""
    container = build_test_container(with_fastapi=True)
    yield container
    await container.close()


@pytest_asyncio.fixture
async def settings(container) -> Settings:
    return await container.get(Settings)


@pytest_asyncio.fixture
async def profile(container):
    """A stored profile to act as the logged-in caller."""
    profile_repo = await container.get(ProfileRepository)
    return await profile_repo.save(make_profile())


@pytest_asyncio.fixture
async def client(container, settings):
    """Anonymous client."""
    app = create_app(settings, container=container)
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client


@pytest_asyncio.fixture
async def auth_client(container, settings, profile):
    """Client carrying a session cookie for ``profile``."""
    token = JWTService(settings.auth).create_token(str(profile.id), profile.email)
    app = create_app(settings, container=container)
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test",
        cookies={"auth_token": token},
    ) as client:
        yield client
