"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tapestry.config import Settings
from tapestry.interface.api.routes import (
    auth,
    comments,
    health,
    life_areas,
    photos,
    posts,
    profiles,
)
from tapestry.interface.error import register_error_handlers
from tapestry.util.di.container import create_container, setup_di
from tapestry.util.observability import instrument_fastapi, instrument_httpx


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function. In production
    start_app.py handles this.

    Args:
        container: DI container to use, the production container when None
    """
    settings = Settings()

    # Outbound calls to the identity and storage services
    instrument_httpx()

    app_instance = FastAPI(
        title="Tapestry API",
        description="Backend API for Tapestry - a journal of small posts and threaded replies",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(life_areas.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(profiles.router)
    app_instance.include_router(photos.router)

    return app_instance
