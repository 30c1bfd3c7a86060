"""Routes for user directory operations.

| METHOD | PATH                   | PERMISSION |
|--------|------------------------|------------|
| POST   | /users                 | CREATE     |
| PATCH  | /users/{user_id}       | EDIT       |
| GET    | /users                 | VIEW       |
| GET    | /users/{user_id}       | VIEW       |
| DELETE | /users/{user_id}       | DELETE     |
| GET    | /users/managed/{user_id} | VIEW     |
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Body, Depends, Path, status

from ums_api.api.deps import UsersServiceDep
from ums_api.core.http import require_permissions
from ums_api.core.rbac import Permission

from .schemas import UserCreate, UserDeleted, UserOut, UserUpdate

router = APIRouter(tags=["users"])

USER_ID_PARAM = Annotated[
    int,
    Path(description="User identifier.", ge=0),
]

_CALLER_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"description": "Caller identifier missing or not numeric."},
    status.HTTP_401_UNAUTHORIZED: {"description": "Caller identifier does not match a user."},
    status.HTTP_403_FORBIDDEN: {"description": "Caller lacks a required permission."},
}


@router.get(
    "/users",
    response_model=list[UserOut],
    status_code=status.HTTP_200_OK,
    summary="List all users",
    dependencies=[Depends(require_permissions(Permission.VIEW))],
    responses=_CALLER_RESPONSES,
)
def list_users(service: UsersServiceDep) -> list[UserOut]:
    return service.list_users()


@router.post(
    "/users",
    response_model=UserOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    dependencies=[Depends(require_permissions(Permission.CREATE))],
    responses={
        **_CALLER_RESPONSES,
        status.HTTP_409_CONFLICT: {
            "description": "A user with the same name already exists in an overlapping group.",
        },
    },
)
def create_user(
    service: UsersServiceDep,
    payload: UserCreate = Body(..., description="User to create."),
) -> UserOut:
    return service.create_user(payload=payload)


@router.get(
    "/users/managed/{user_id}",
    response_model=list[UserOut],
    status_code=status.HTTP_200_OK,
    summary="List users managed by an administrator",
    dependencies=[Depends(require_permissions(Permission.VIEW))],
    responses={
        **_CALLER_RESPONSES,
        status.HTTP_404_NOT_FOUND: {"description": "User not found."},
    },
)
def list_managed_users(user_id: USER_ID_PARAM, service: UsersServiceDep) -> list[UserOut]:
    return service.list_managed(admin_id=user_id)


@router.get(
    "/users/{user_id}",
    response_model=UserOut,
    status_code=status.HTTP_200_OK,
    summary="Retrieve a user",
    dependencies=[Depends(require_permissions(Permission.VIEW))],
    responses={
        **_CALLER_RESPONSES,
        status.HTTP_404_NOT_FOUND: {"description": "User not found."},
    },
)
def get_user(user_id: USER_ID_PARAM, service: UsersServiceDep) -> UserOut:
    return service.get_user(user_id=user_id)


@router.patch(
    "/users/{user_id}",
    response_model=UserOut,
    status_code=status.HTTP_200_OK,
    summary="Partially update a user",
    dependencies=[Depends(require_permissions(Permission.EDIT))],
    responses={
        **_CALLER_RESPONSES,
        status.HTTP_404_NOT_FOUND: {"description": "User not found."},
    },
)
def update_user(
    user_id: USER_ID_PARAM,
    service: UsersServiceDep,
    payload: UserUpdate = Body(..., description="Fields to update on the user record."),
) -> UserOut:
    return service.update_user(user_id=user_id, payload=payload)


@router.delete(
    "/users/{user_id}",
    response_model=UserDeleted,
    status_code=status.HTTP_200_OK,
    summary="Delete a user",
    dependencies=[Depends(require_permissions(Permission.DELETE))],
    responses={
        **_CALLER_RESPONSES,
        status.HTTP_404_NOT_FOUND: {"description": "User not found."},
    },
)
def delete_user(user_id: USER_ID_PARAM, service: UsersServiceDep) -> UserDeleted:
    service.delete_user(user_id=user_id)
    return UserDeleted()


__all__ = ["router"]
