"""Production container and FastAPI hookup."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from humor.util.di import build_providers


def create_container() -> AsyncContainer:
    """Container with every production implementation."""
    return make_async_container(*build_providers(), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container so routes can use ``FromDishka``."""
    setup_dishka(container, app)
