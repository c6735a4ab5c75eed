"""Production container and FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from board.util.di import instantiate_providers


def create_container() -> AsyncContainer:
    """Build the container with every production implementation.

    ``FastapiProvider`` exposes the current ``Request`` to providers.
    """
    return make_async_container(*instantiate_providers(), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container so routes can use ``FromDishka``."""
    setup_dishka(container, app)
