"""FastAPI dependencies that bridge HTTP requests to the authorization engine."""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Request

from ums_api.api.deps import AuthorizationEngineDep, SettingsDep
from ums_api.core.auth import PermissionDeniedError
from ums_api.core.models import User
from ums_api.core.rbac import Permission
from ums_api.features.rbac.service import AuthorizationDecision

PermissionDependency = Callable[..., AuthorizationDecision]


def get_raw_caller_id(request: Request, settings: SettingsDep) -> str | None:
    """Return the caller identifier exactly as the client sent it."""

    return request.headers.get(settings.caller_header)


RawCallerDep = Annotated[str | None, Depends(get_raw_caller_id)]


def get_current_caller(
    request: Request,
    raw_caller_id: RawCallerDep,
    engine: AuthorizationEngineDep,
) -> User:
    """Resolve the caller without requiring any permission."""

    caller = engine.resolve_caller(raw_caller_id)
    request.state.caller_id = caller.id
    return caller


def require_permissions(*permissions: Permission | str) -> PermissionDependency:
    """Return a dependency enforcing every permission in ``permissions``."""

    required = tuple(str(getattr(p, "value", p)) for p in permissions)

    def dependency(
        request: Request,
        raw_caller_id: RawCallerDep,
        engine: AuthorizationEngineDep,
    ) -> AuthorizationDecision:
        decision = engine.authorize(raw_caller_id, required)
        request.state.caller_id = decision.caller_id
        if not decision.allowed:
            raise PermissionDeniedError(decision.missing, caller_id=decision.caller_id)
        return decision

    dependency.required_permissions = required  # type: ignore[attr-defined]
    return dependency


__all__ = [
    "PermissionDependency",
    "get_current_caller",
    "get_raw_caller_id",
    "require_permissions",
]
