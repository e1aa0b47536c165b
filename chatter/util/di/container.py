"""Dependency injection container."""

from collections.abc import Iterable

import logfire
from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from chatter.util.di import PROVIDERS, Component


def build_container(mocked: Iterable[Component] = ()) -> AsyncContainer:
    """Assemble a container from ``PROVIDERS``.

    Args:
        mocked: Components to replace with their mock implementation

    Returns:
        Container that can also back a FastAPI app

    Raises:
        ValueError: If a mocked component has no mock implementation
    """
    mocked = set(mocked)
    providers = [
        base.implementation(use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]
    logfire.debug("Building DI container", mocked=sorted(mocked))
    return make_async_container(*providers, FastapiProvider())


def create_container() -> AsyncContainer:
    """Build the production container (no mocks)."""
    return build_container()


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Serve the app's ``FromDishka`` dependencies from ``container``."""
    setup_dishka(container, app)
