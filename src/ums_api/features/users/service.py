"""Business logic for user operations."""

from __future__ import annotations

import logging

from ums_api.common.logging import log_context
from ums_api.core.models import User

from .errors import UserConflictError, UserNotFoundError
from .repository import UserDraft, UserPatch, UsersRepository
from .schemas import UserCreate, UserOut, UserUpdate
from .visibility import VisibilityResolver

logger = logging.getLogger(__name__)


def _serialize(user: User) -> UserOut:
    return UserOut(id=user.id, name=user.name, roles=list(user.roles), groups=list(user.groups))


class UsersService:
    """CRUD over the user directory plus the managed-users view."""

    def __init__(
        self,
        *,
        repository: UsersRepository,
        visibility: VisibilityResolver | None = None,
    ) -> None:
        self._repo = repository
        self._visibility = visibility or VisibilityResolver(repository=repository)

    def list_users(self) -> list[UserOut]:
        users = self._repo.list_users()
        logger.debug("users.list.success", extra=log_context(count=len(users)))
        return [_serialize(user) for user in users]

    def get_user(self, *, user_id: int) -> UserOut:
        """Return a single user by identifier."""

        user = self._repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return _serialize(user)

    def create_user(self, *, payload: UserCreate) -> UserOut:
        """Create a user, rejecting same-name duplicates in a shared group."""

        draft = UserDraft.build(name=payload.name, roles=payload.roles, groups=payload.groups)
        logger.debug(
            "users.create.start",
            extra=log_context(roles=draft.roles, groups=draft.groups),
        )

        try:
            user = self._repo.create(draft)
        except UserConflictError:
            logger.info(
                "users.create.conflict",
                extra=log_context(groups=draft.groups),
            )
            raise

        logger.info(
            "users.create.success",
            extra=log_context(user_id=user.id, roles=user.roles, groups=user.groups),
        )
        return _serialize(user)

    def update_user(self, *, user_id: int, payload: UserUpdate) -> UserOut:
        """Update only the fields supplied in ``payload``."""

        patch = UserPatch.from_fields(payload.changes())
        user = self._repo.update(user_id, patch)
        if user is None:
            raise UserNotFoundError(user_id)

        logger.info(
            "users.update.success",
            extra=log_context(user_id=user_id, fields=patch.fields()),
        )
        return _serialize(user)

    def delete_user(self, *, user_id: int) -> bool:
        if not self._repo.delete(user_id):
            raise UserNotFoundError(user_id)
        logger.info("users.delete.success", extra=log_context(user_id=user_id))
        return True

    def list_managed(self, *, admin_id: int) -> list[UserOut]:
        """Return the users ``admin_id`` manages through shared groups."""

        return [_serialize(user) for user in self._visibility.managed_by(admin_id)]


__all__ = ["UsersService"]
