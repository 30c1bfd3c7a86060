"""Service layer for the health module."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from ums_api.common.logging import log_context
from ums_api.features.users.repository import UsersRepository
from ums_api.settings import Settings

from .schemas import HealthCheckResponse, HealthComponentStatus

logger = logging.getLogger(__name__)


class HealthService:
    """Compute the liveness payload."""

    def __init__(self, *, settings: Settings, repository: UsersRepository) -> None:
        self._settings = settings
        self._repo = repository

    def status(self) -> HealthCheckResponse:
        user_count = len(self._repo.list_users())
        components = [
            HealthComponentStatus(
                name="api",
                status="available",
                detail=f"v{self._settings.app_version}",
            ),
            HealthComponentStatus(
                name="directory",
                status="available",
                detail=f"{user_count} users",
            ),
        ]
        logger.debug(
            "health.status.success",
            extra=log_context(app_version=self._settings.app_version, user_count=user_count),
        )
        return HealthCheckResponse(
            status="ok",
            timestamp=datetime.now(tz=UTC),
            components=components,
        )


__all__ = ["HealthService"]
