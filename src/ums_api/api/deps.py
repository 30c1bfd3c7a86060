"""Service factories used by API routers.

This module is the single place routers import per-request service
constructors from. Long-lived collaborators (settings, role registry, user
directory) live on ``app.state`` and are created by the application lifespan.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from ums_api.core.rbac import RoleRegistry
from ums_api.features.rbac.service import AuthorizationEngine
from ums_api.features.users.repository import UsersRepository
from ums_api.features.users.service import UsersService
from ums_api.settings import Settings


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_role_registry(request: Request) -> RoleRegistry:
    return request.app.state.role_registry


def get_users_repository(request: Request) -> UsersRepository:
    return request.app.state.users_repository


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
RoleRegistryDep = Annotated[RoleRegistry, Depends(get_role_registry)]
UsersRepositoryDep = Annotated[UsersRepository, Depends(get_users_repository)]


def get_authorization_engine(
    repository: UsersRepositoryDep,
    registry: RoleRegistryDep,
) -> AuthorizationEngine:
    return AuthorizationEngine(repository=repository, registry=registry)


def get_users_service(repository: UsersRepositoryDep) -> UsersService:
    return UsersService(repository=repository)


AuthorizationEngineDep = Annotated[AuthorizationEngine, Depends(get_authorization_engine)]
UsersServiceDep = Annotated[UsersService, Depends(get_users_service)]

__all__ = [
    "AuthorizationEngineDep",
    "RoleRegistryDep",
    "SettingsDep",
    "UsersRepositoryDep",
    "UsersServiceDep",
    "get_app_settings",
    "get_authorization_engine",
    "get_role_registry",
    "get_users_repository",
    "get_users_service",
]
