"""Group-scoped visibility of directory records for administrators."""

from __future__ import annotations

import logging

from ums_api.common.logging import log_context
from ums_api.core.models import User
from ums_api.core.rbac import ADMIN_ROLE

from .errors import UserNotFoundError
from .repository import UsersRepository

logger = logging.getLogger(__name__)


class VisibilityResolver:
    """Compute which users an administrator manages."""

    def __init__(self, *, repository: UsersRepository, admin_role: str = ADMIN_ROLE) -> None:
        self._repo = repository
        self._admin_role = admin_role

    def managed_by(self, admin_id: int) -> list[User]:
        """Return the users sharing at least one group with ``admin_id``.

        A user without the admin role manages nobody, which is an empty result
        rather than an error. The admin's own record is never included; order
        follows the directory.
        """

        admin = self._repo.get_by_id(admin_id)
        if admin is None:
            raise UserNotFoundError(admin_id)

        if not admin.has_role(self._admin_role):
            logger.debug(
                "users.managed.not_admin",
                extra=log_context(user_id=admin_id),
            )
            return []

        groups = set(admin.groups)
        managed = [
            user
            for user in self._repo.list_users()
            if user.id != admin.id and not groups.isdisjoint(user.groups)
        ]
        logger.debug(
            "users.managed.resolved",
            extra=log_context(user_id=admin_id, count=len(managed)),
        )
        return managed


__all__ = ["VisibilityResolver"]
