"""Shared caller-resolution and permission error types."""

from __future__ import annotations

from collections.abc import Iterable


class AuthenticationError(Exception):
    """Raised when the caller of a request cannot be established."""


class MalformedCallerIdError(AuthenticationError):
    """Raised when the raw caller identifier is absent or not a non-negative integer."""

    def __init__(self, raw: object | None) -> None:
        self.raw = raw
        super().__init__("Caller identifier must be a non-negative integer user id")


class UnknownCallerError(AuthenticationError):
    """Raised when a well-formed caller id does not match a live user."""

    def __init__(self, caller_id: int) -> None:
        self.caller_id = caller_id
        super().__init__(f"Caller {caller_id} is not a registered user")


class PermissionDeniedError(Exception):
    """Raised when a caller lacks one or more required permissions."""

    def __init__(self, missing: Iterable[str], *, caller_id: int | None = None) -> None:
        self.missing = tuple(missing)
        self.caller_id = caller_id
        super().__init__(
            "Not allowed to perform action due to insufficient permissions"
        )
