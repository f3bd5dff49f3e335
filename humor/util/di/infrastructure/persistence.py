"""Caption store providers: engine, per-request session and repositories."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from humor.config import Settings
from humor.domain.repository import (
    CaptionExampleRepository,
    CaptionRepository,
    CaptionVoteRepository,
    ProfileRepository,
)
from humor.persistence.database import create_engine, create_session_factory
from humor.persistence.repository import (
    PostgresCaptionExampleRepository,
    PostgresCaptionRepository,
    PostgresCaptionVoteRepository,
    PostgresProfileRepository,
)
from humor.util.di.base import ProviderBase
from humor.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Repositories backed by the hosted PostgreSQL caption store.

    One session per request. It commits when the request's handler returns
    and rolls back when it raises.
    """

    __is_mock__ = False

    profiles = provide(
        PostgresProfileRepository, provides=ProfileRepository, scope=Scope.REQUEST
    )
    captions = provide(
        PostgresCaptionRepository, provides=CaptionRepository, scope=Scope.REQUEST
    )
    votes = provide(
        PostgresCaptionVoteRepository,
        provides=CaptionVoteRepository,
        scope=Scope.REQUEST,
    )
    examples = provide(
        PostgresCaptionExampleRepository,
        provides=CaptionExampleRepository,
        scope=Scope.REQUEST,
    )

    @provide(scope=Scope.APP)
    async def engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Rolling back request session", error=str(e))
                await session.rollback()
                raise
