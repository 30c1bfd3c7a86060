"""Demo directory loaded at startup when ``UMS_SEED_USERS`` is enabled."""

from __future__ import annotations

from ums_api.core.models import User

SEED_USERS: tuple[User, ...] = (
    User(id=1, name="John Doe", roles=("ADMIN", "PERSONAL"), groups=("GROUP_1",)),
    User(id=2, name="Grabriel Monroe", roles=("PERSONAL",), groups=("GROUP_1", "GROUP_2")),
    User(id=3, name="Alex Xavier", roles=("PERSONAL",), groups=("GROUP_2",)),
    User(id=4, name="Jarvis Khan", roles=("ADMIN", "PERSONAL"), groups=("GROUP_2",)),
    User(id=5, name="Martines Polok", roles=("ADMIN", "PERSONAL"), groups=("GROUP_1",)),
    User(id=6, name="Gabriela Wozniak", roles=("VIEWER", "PERSONAL"), groups=("GROUP_1",)),
)


def seed_users() -> list[User]:
    """Fresh copies of the demo records."""

    return [user.copy() for user in SEED_USERS]


__all__ = ["SEED_USERS", "seed_users"]
