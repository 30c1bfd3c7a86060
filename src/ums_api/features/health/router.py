"""API routes for the health module."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from ums_api.api.deps import SettingsDep, UsersRepositoryDep

from .schemas import HealthCheckResponse
from .service import HealthService

router = APIRouter()


def get_health_service(settings: SettingsDep, repository: UsersRepositoryDep) -> HealthService:
    return HealthService(settings=settings, repository=repository)


@router.get(
    "",
    response_model=HealthCheckResponse,
    status_code=status.HTTP_200_OK,
    summary="Service health status",
    response_model_exclude_none=True,
)
def read_health(
    service: Annotated[HealthService, Depends(get_health_service)],
) -> HealthCheckResponse:
    """Return the current health information for the API."""
    return service.status()
