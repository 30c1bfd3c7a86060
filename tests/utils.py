"""Helpers shared by the integration tests."""

from __future__ import annotations

from ums_api.settings import DEFAULT_CALLER_HEADER

ADMIN_ID = 1
PERSONAL_ID = 2
VIEWER_ID = 6


def as_caller(user_id: int | str, *, header: str = DEFAULT_CALLER_HEADER) -> dict[str, str]:
    """Headers identifying ``user_id`` as the caller."""

    return {header: str(user_id)}
