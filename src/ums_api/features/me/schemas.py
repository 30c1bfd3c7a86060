"""Schemas for the caller's own permission summary."""

from __future__ import annotations

from pydantic import Field

from ums_api.common.schema import BaseSchema


class EffectivePermissions(BaseSchema):
    """Roles held by the caller and the permissions they aggregate to."""

    caller_id: int = Field(..., alias="callerId")
    name: str
    roles: list[str] = Field(default_factory=list)
    groups: list[str] = Field(default_factory=list)
    permissions: list[str] = Field(
        default_factory=list,
        description="Union of the permissions granted by every held role, sorted.",
    )


__all__ = ["EffectivePermissions"]
