"""UMS FastAPI application entry point."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from .app.lifecycles import create_application_lifespan, init_app_state
from .common.exceptions import register_common_exception_handlers
from .common.logging import setup_logging
from .common.middleware import register_middleware
from .core.http import register_domain_exception_handlers
from .routers import api_router
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)
API_PREFIX = "/api"


def create_app(settings: Settings | None = None) -> FastAPI:
    """Return a configured FastAPI application."""

    settings = settings or get_settings()
    setup_logging(settings)

    docs_url = settings.docs_url if settings.api_docs_enabled else None
    redoc_url = settings.redoc_url if settings.api_docs_enabled else None
    openapi_url = settings.openapi_url if settings.api_docs_enabled else None

    lifespan = create_application_lifespan(
        settings=settings,
    )

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url=docs_url,
        redoc_url=redoc_url,
        openapi_url=openapi_url,
        lifespan=lifespan,
    )

    init_app_state(app, settings)
    if settings.expose_missing_permissions:
        logger.warning(
            "Permission denials will list missing permissions in response bodies.",
            extra={"expose_missing_permissions": True},
        )

    register_middleware(app, settings)
    register_common_exception_handlers(app)
    register_domain_exception_handlers(app)
    app.include_router(api_router, prefix=API_PREFIX)
    return app


__all__ = [
    "API_PREFIX",
    "create_app",
]

app = create_app()
