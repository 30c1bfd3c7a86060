"""Directory error types surfaced to the HTTP layer."""

from __future__ import annotations

from collections.abc import Iterable


class UserError(Exception):
    """Base class for user directory errors."""


class UserNotFoundError(UserError):
    """Raised when an id does not reference a live user."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__("User not found")


class UserConflictError(UserError):
    """Raised when a same-named user already exists in an overlapping group."""

    def __init__(self, name: str, groups: Iterable[str]) -> None:
        self.name = name
        self.groups = tuple(groups)
        super().__init__("User with same name in overlapping group already exists")


__all__ = ["UserConflictError", "UserError", "UserNotFoundError"]
