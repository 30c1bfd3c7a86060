"""FastAPI lifespan helpers for the UMS application."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.routing import Lifespan

from ums_api.common.logging import log_context
from ums_api.core.rbac import RoleRegistry
from ums_api.features.users.repository import InMemoryUsersRepository
from ums_api.features.users.seed import seed_users
from ums_api.settings import Settings

logger = logging.getLogger(__name__)


def init_app_state(app: FastAPI, settings: Settings) -> None:
    """Attach the long-lived collaborators routers resolve from ``app.state``."""

    app.state.settings = settings
    app.state.role_registry = RoleRegistry()
    app.state.users_repository = InMemoryUsersRepository(
        seed_users() if settings.seed_users else ()
    )


def create_application_lifespan(
    *,
    settings: Settings,
) -> Lifespan[FastAPI]:
    """Return the FastAPI lifespan handler used by the app factory."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if getattr(app.state, "users_repository", None) is None:
            init_app_state(app, settings)
        logger.info(
            "app.startup",
            extra=log_context(
                app_version=settings.app_version,
                users=len(app.state.users_repository),
                roles=app.state.role_registry.codes,
                caller_header=settings.caller_header,
            ),
        )
        try:
            yield
        finally:
            logger.info("app.shutdown")

    return lifespan


__all__ = ["create_application_lifespan", "init_app_state"]
