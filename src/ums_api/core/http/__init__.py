"""HTTP bridging for caller resolution and permission checks."""

from .dependencies import (
    get_current_caller,
    get_raw_caller_id,
    require_permissions,
)
from .errors import register_domain_exception_handlers

__all__ = [
    "get_current_caller",
    "get_raw_caller_id",
    "register_domain_exception_handlers",
    "require_permissions",
]
