"""Canonical role registry.

The role table is immutable configuration: it is declared once here and wrapped
in a :class:`RoleRegistry` that callers receive by injection, so tests can
swap in a different table without touching module state.
"""

from __future__ import annotations

from collections.abc import Iterable

from ums_api.core.rbac.types import Permission, RoleCode, RoleDef

ALL_PERMISSIONS: frozenset[str] = frozenset(p.value for p in Permission)

ADMIN_ROLE = RoleCode.ADMIN.value

ROLE_DEFINITIONS: tuple[RoleDef, ...] = (
    RoleDef(
        code=RoleCode.ADMIN.value,
        name="Admin",
        permissions=ALL_PERMISSIONS,
        description="Full access to user records; manages users sharing a group.",
    ),
    RoleDef(
        code=RoleCode.PERSONAL.value,
        name="Personal",
        permissions=frozenset(),
        description="Baseline role with no permissions of its own.",
    ),
    RoleDef(
        code=RoleCode.VIEWER.value,
        name="Viewer",
        permissions=frozenset({Permission.VIEW.value}),
        description="Read-only access to the user directory.",
    ),
)


class RoleRegistry:
    """Read-only lookup from role code to granted permissions."""

    def __init__(self, definitions: Iterable[RoleDef] = ROLE_DEFINITIONS) -> None:
        self._roles: tuple[RoleDef, ...] = tuple(definitions)
        self._by_code: dict[str, RoleDef] = {role.code: role for role in self._roles}

    @property
    def roles(self) -> tuple[RoleDef, ...]:
        return self._roles

    @property
    def codes(self) -> tuple[str, ...]:
        return tuple(self._by_code)

    def get(self, code: str) -> RoleDef | None:
        return self._by_code.get(code)

    def permissions_for(self, code: str) -> frozenset[str]:
        """Return the permissions granted by ``code``.

        Unknown codes grant nothing; rejecting invalid codes is the job of
        payload validation when a user is created.
        """

        role = self._by_code.get(code)
        if role is None:
            return frozenset()
        return role.permissions

    def aggregate(self, codes: Iterable[str]) -> frozenset[str]:
        """Union of the permissions granted by every role in ``codes``."""

        granted: set[str] = set()
        for code in codes:
            granted.update(self.permissions_for(code))
        return frozenset(granted)


DEFAULT_ROLE_REGISTRY = RoleRegistry()

__all__ = [
    "ADMIN_ROLE",
    "ALL_PERMISSIONS",
    "DEFAULT_ROLE_REGISTRY",
    "ROLE_DEFINITIONS",
    "RoleRegistry",
]
