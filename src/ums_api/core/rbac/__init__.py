"""RBAC contracts and registries shared across features."""

from .registry import (
    ADMIN_ROLE,
    ALL_PERMISSIONS,
    DEFAULT_ROLE_REGISTRY,
    ROLE_DEFINITIONS,
    RoleRegistry,
)
from .types import GroupCode, Permission, RoleCode, RoleDef

__all__ = [
    "ADMIN_ROLE",
    "ALL_PERMISSIONS",
    "DEFAULT_ROLE_REGISTRY",
    "ROLE_DEFINITIONS",
    "GroupCode",
    "Permission",
    "RoleCode",
    "RoleDef",
    "RoleRegistry",
]
