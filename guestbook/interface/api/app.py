"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from guestbook.interface.api.routes import greetings, health, oauth
from guestbook.interface.error import register_exception_handlers
from guestbook.util.di.container import create_container, setup_di
from guestbook.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it without sending.

    Args:
        container: DI container to use (defaults to the production container)
    """
    # Instrument httpx for the token exchange and profile requests
    instrument_httpx()

    app_instance = FastAPI(
        title="Guestbook",
        description="Guestbook with Google OAuth sign-in",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    register_exception_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(oauth.router)
    app_instance.include_router(greetings.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
