"""Storage contract and in-memory implementation for ``User`` records."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Protocol

from ums_api.core.models import User, ordered_set

from .errors import UserConflictError

_UNSET: Any = object()


def normalize_name(value: str) -> str:
    """Case- and whitespace-insensitive form of a user name."""

    return " ".join(value.split()).casefold()


@dataclass(frozen=True)
class UserDraft:
    """Fields required to create a user; the directory assigns the id."""

    name: str
    roles: tuple[str, ...]
    groups: tuple[str, ...]

    @classmethod
    def build(cls, *, name: str, roles: Iterable[str], groups: Iterable[str]) -> UserDraft:
        return cls(name=name, roles=ordered_set(roles), groups=ordered_set(groups))


@dataclass(frozen=True)
class UserPatch:
    """Partial update; fields left as ``_UNSET`` are not touched."""

    name: Any = _UNSET
    roles: Any = _UNSET
    groups: Any = _UNSET

    @classmethod
    def from_fields(cls, fields: dict[str, Any]) -> UserPatch:
        kwargs: dict[str, Any] = {}
        if "name" in fields:
            kwargs["name"] = fields["name"]
        if "roles" in fields:
            kwargs["roles"] = ordered_set(fields["roles"])
        if "groups" in fields:
            kwargs["groups"] = ordered_set(fields["groups"])
        return cls(**kwargs)

    def fields(self) -> tuple[str, ...]:
        return tuple(
            name
            for name in ("name", "roles", "groups")
            if getattr(self, name) is not _UNSET
        )

    def is_empty(self) -> bool:
        return not self.fields()


def apply_patch(user: User, patch: UserPatch) -> None:
    """Merge the fields present in ``patch`` into ``user`` in place."""

    if patch.name is not _UNSET:
        user.name = patch.name
    if patch.roles is not _UNSET:
        user.roles = ordered_set(patch.roles)
    if patch.groups is not _UNSET:
        user.groups = ordered_set(patch.groups)


class UsersRepository(Protocol):
    """User directory contract.

    Every method is atomic with respect to every other one. Returned records
    are snapshots: mutating the store later never changes them.
    """

    def list_users(self) -> list[User]: ...

    def get_by_id(self, user_id: int) -> User | None: ...

    def create(self, draft: UserDraft) -> User: ...

    def update(self, user_id: int, patch: UserPatch) -> User | None: ...

    def delete(self, user_id: int) -> bool: ...


class InMemoryUsersRepository:
    """Process-memory directory guarded by a single re-entrant lock."""

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._lock = threading.RLock()
        self._users: list[User] = []
        for user in users:
            self._insert(user.copy())

    def _insert(self, user: User) -> None:
        if self._index_of(user.id) is not None:
            raise ValueError(f"Duplicate user id {user.id}")
        self._users.append(user)

    def _index_of(self, user_id: int) -> int | None:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        return None

    def _next_id(self) -> int:
        return max((user.id for user in self._users), default=0) + 1

    def _find_conflict(self, draft: UserDraft) -> User | None:
        normalized = normalize_name(draft.name)
        groups = set(draft.groups)
        for user in self._users:
            if normalize_name(user.name) == normalized and not groups.isdisjoint(user.groups):
                return user
        return None

    def list_users(self) -> list[User]:
        with self._lock:
            return [user.copy() for user in self._users]

    def get_by_id(self, user_id: int) -> User | None:
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                return None
            return self._users[index].copy()

    def create(self, draft: UserDraft) -> User:
        with self._lock:
            if self._find_conflict(draft) is not None:
                raise UserConflictError(draft.name, draft.groups)
            user = User(
                id=self._next_id(),
                name=draft.name,
                roles=ordered_set(draft.roles),
                groups=ordered_set(draft.groups),
            )
            self._users.append(user)
            return user.copy()

    def update(self, user_id: int, patch: UserPatch) -> User | None:
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                return None
            user = self._users[index]
            apply_patch(user, patch)
            return user.copy()

    def delete(self, user_id: int) -> bool:
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                return False
            del self._users[index]
            return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)


__all__ = [
    "InMemoryUsersRepository",
    "UserDraft",
    "UserPatch",
    "UsersRepository",
    "apply_patch",
    "normalize_name",
]
