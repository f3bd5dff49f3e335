"""Logfire setup.

Services and use cases log through logfire directly:

    import logfire

    logfire.info("Vote created", vote_id=str(vote.id))

    with logfire.span("cast_vote", caption_id=str(caption_id)):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from humor.config import Settings

SERVICE_NAME = "humor-api"


def _should_send(settings: Settings) -> bool:
    """An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins over token presence."""
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is built.

    Without a token and without OBSERVABILITY__SEND_TO_LOGFIRE, spans and
    logs only reach the console.
    """
    send = _should_send(settings)
    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Logfire ready",
        service=SERVICE_NAME,
        git_sha=settings.git_sha,
        send_to_logfire=send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace API requests.

    Load balancer probes of /health are left out. Headers are never
    captured since the session token travels in a cookie.
    """
    logfire.instrument_fastapi(app, capture_headers=False, excluded_urls="/health")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace queries against the caption store."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace calls to Google's OAuth endpoints."""
    logfire.instrument_httpx()
