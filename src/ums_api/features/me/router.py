from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from ums_api.api.deps import AuthorizationEngineDep
from ums_api.core.http import get_current_caller
from ums_api.core.models import User

from .schemas import EffectivePermissions

router = APIRouter(
    prefix="/me",
    tags=["me"],
)


@router.get(
    "/permissions",
    response_model=EffectivePermissions,
    status_code=status.HTTP_200_OK,
    summary="Return the caller's roles and aggregated permissions",
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Caller identifier missing or not numeric."},
        status.HTTP_401_UNAUTHORIZED: {"description": "Caller identifier does not match a user."},
    },
)
def read_effective_permissions(
    caller: Annotated[User, Depends(get_current_caller)],
    engine: AuthorizationEngineDep,
) -> EffectivePermissions:
    return EffectivePermissions(
        caller_id=caller.id,
        name=caller.name,
        roles=list(caller.roles),
        groups=list(caller.groups),
        permissions=sorted(engine.aggregated_permissions(caller)),
    )
