"""FastAPI application."""

from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chatter.config import Settings
from chatter.interface.api.routes import auth, comments, health, ws
from chatter.util.di.container import create_container, setup_di
from chatter.util.observability import SERVICE_VERSION, instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Disposes the engine and any other APP-scoped resources
    await app.state.dishka_container.close()
    logfire.info("DI container closed")


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use (defaults to the production container)
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Chatter API",
        description=(
            "Threaded, page-scoped comments with reactions and live updates"
        ),
        version=SERVICE_VERSION,
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    # The comment widget is embedded on a single client origin
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.client_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(ws.router)

    return app_instance
