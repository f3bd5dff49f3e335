"""FastAPI application for the caption voting API."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from humor.config import API_VERSION, Settings
from humor.interface.api.routes import (
    auth,
    caption_examples,
    captions,
    health,
    votes,
)
from humor.util.di.container import create_container, setup_di
from humor.util.logging import setup_logging
from humor.util.observability import instrument_fastapi, instrument_httpx

ROUTERS = (
    health.router,
    auth.router,
    captions.router,
    votes.router,
    caption_examples.router,
)


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Build the app.

    Logfire is expected to be configured already; ``scripts/start_app.py``
    does that in production. Tests pass their own settings and a container
    with mocked components.
    """
    settings = settings or Settings()
    setup_logging(settings)

    app = FastAPI(
        title="Humor Captions API",
        description="Vote on captions written for images",
        version=API_VERSION,
    )
    instrument_fastapi(app)
    instrument_httpx()

    # The frontend sends the session cookie with every call
    app.add_middleware(
        CORSMiddleware,
        allow_origins=sorted({settings.api.frontend_url, "http://localhost:3000"}),
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app, container or create_container())
    for router in ROUTERS:
        app.include_router(router)

    return app


app = create_app()
