"""HTTP interface for the role catalog."""

from __future__ import annotations

from fastapi import APIRouter, status

from ums_api.api.deps import RoleRegistryDep

from .schemas import RoleOut

router = APIRouter(tags=["rbac"])


@router.get(
    "/roles",
    response_model=list[RoleOut],
    status_code=status.HTTP_200_OK,
    summary="List role definitions",
)
def list_roles(registry: RoleRegistryDep) -> list[RoleOut]:
    """Return every role with the permissions it grants."""

    return [RoleOut.from_definition(role) for role in registry.roles]


__all__ = ["router"]
