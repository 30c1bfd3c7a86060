"""RBAC type definitions used across the stack."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Permission(str, enum.Enum):
    """Closed set of capability tokens a role can grant."""

    CREATE = "CREATE"
    VIEW = "VIEW"
    EDIT = "EDIT"
    DELETE = "DELETE"


class RoleCode(str, enum.Enum):
    """Fixed universe of assignable roles."""

    ADMIN = "ADMIN"
    PERSONAL = "PERSONAL"
    VIEWER = "VIEWER"


class GroupCode(str, enum.Enum):
    """Known groups used to scope admin visibility."""

    GROUP_1 = "GROUP_1"
    GROUP_2 = "GROUP_2"


@dataclass(frozen=True)
class RoleDef:
    """Static role definition loaded at startup."""

    code: str
    name: str
    permissions: frozenset[str]
    description: str = ""
