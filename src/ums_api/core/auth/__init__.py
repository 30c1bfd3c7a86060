"""Caller identification primitives consumed by the authorization engine."""

from .caller import parse_caller_id
from .errors import (
    AuthenticationError,
    MalformedCallerIdError,
    PermissionDeniedError,
    UnknownCallerError,
)

__all__ = [
    "AuthenticationError",
    "MalformedCallerIdError",
    "PermissionDeniedError",
    "UnknownCallerError",
    "parse_caller_id",
]
