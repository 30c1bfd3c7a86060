"""Pydantic schemas for user payloads."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import Field, StringConstraints, model_validator

from ums_api.common.schema import BaseSchema
from ums_api.core.rbac.types import GroupCode, RoleCode

UserName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
RoleList = Annotated[list[RoleCode], Field(min_length=1)]
GroupList = Annotated[list[GroupCode], Field(min_length=1)]


class UserCreate(BaseSchema):
    """Payload accepted when creating a user."""

    name: UserName = Field(..., description="Full name of the user.")
    roles: RoleList = Field(..., description="Role codes assigned to the user.")
    groups: GroupList = Field(..., description="Groups the user belongs to.")


class UserUpdate(BaseSchema):
    """Partial update payload; only supplied fields are changed."""

    name: UserName | None = None
    roles: RoleList | None = None
    groups: GroupList | None = None

    @model_validator(mode="after")
    def _require_values(self) -> UserUpdate:
        if not self.model_fields_set:
            raise ValueError("Provide at least one field to update.")
        for field_name in self.model_fields_set:
            if getattr(self, field_name) is None:
                raise ValueError(f"{field_name} cannot be null.")
        return self

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class UserOut(BaseSchema):
    """User record as returned by the API."""

    id: int
    name: str
    roles: list[str] = Field(default_factory=list)
    groups: list[str] = Field(default_factory=list)


class UserDeleted(BaseSchema):
    status: str = "deleted"


__all__ = ["UserCreate", "UserDeleted", "UserOut", "UserUpdate"]
