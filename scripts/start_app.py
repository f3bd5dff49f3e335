#!/usr/bin/env python3
"""Run the caption voting API under uvicorn.

Logfire is configured before the app module is imported, so a failure
while building the app or the DI container is still reported.
"""

import sys

import logfire
import uvicorn

from humor.config import Settings
from humor.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting humor API",
            environment=settings.environment,
            port=settings.port,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "humor.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            reload=settings.environment == "development",
        )
    except Exception as e:
        logfire.error(
            "humor API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
