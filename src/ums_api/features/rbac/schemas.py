"""Pydantic schemas for the role catalog."""

from __future__ import annotations

from pydantic import Field

from ums_api.common.schema import BaseSchema
from ums_api.core.rbac import RoleDef


class RoleOut(BaseSchema):
    """Role definition as exposed by the catalog endpoint."""

    code: str = Field(..., description="Role code assigned to users.")
    name: str = Field(..., description="Human-readable role name.")
    description: str = ""
    permissions: list[str] = Field(
        default_factory=list,
        description="Permissions granted by the role, sorted.",
    )

    @classmethod
    def from_definition(cls, role: RoleDef) -> RoleOut:
        return cls(
            code=role.code,
            name=role.name,
            description=role.description,
            permissions=sorted(role.permissions),
        )


__all__ = ["RoleOut"]
