"""User record held by the directory."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace


def ordered_set(values: Iterable[str]) -> tuple[str, ...]:
    """Deduplicate ``values`` keeping first-occurrence order."""

    return tuple(dict.fromkeys(str(value) for value in values))


@dataclass(slots=True)
class User:
    """A directory entry.

    ``roles`` and ``groups`` are ordered sets stored as tuples, so a shallow
    copy of a record is independent of later mutations to the original.
    """

    id: int
    name: str
    roles: tuple[str, ...] = field(default_factory=tuple)
    groups: tuple[str, ...] = field(default_factory=tuple)

    def copy(self) -> User:
        return replace(self)

    def has_role(self, code: str) -> bool:
        return code in self.roles

    def shares_group_with(self, other: User) -> bool:
        return not set(self.groups).isdisjoint(other.groups)


__all__ = ["User", "ordered_set"]
