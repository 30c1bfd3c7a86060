"""Exception handlers that translate domain errors to HTTP responses."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ums_api.common.problem_details import ProblemDetailsErrorItem, problem_response
from ums_api.features.users.errors import UserConflictError, UserNotFoundError

from ..auth.errors import MalformedCallerIdError, PermissionDeniedError, UnknownCallerError


def _handle_malformed_caller(request: Request, exc: MalformedCallerIdError) -> JSONResponse:
    """Translate an unparseable caller identifier into HTTP 400."""

    header = request.app.state.settings.caller_header
    return problem_response(
        request,
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=f"{header} header must be a numeric user ID",
    )


def _handle_unknown_caller(request: Request, exc: UnknownCallerError) -> JSONResponse:
    """Translate a well-formed but unregistered caller into HTTP 401."""

    return problem_response(
        request,
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=str(exc),
    )


def _handle_permission_error(request: Request, exc: PermissionDeniedError) -> JSONResponse:
    """Translate permission denials into HTTP 403 responses."""

    errors = None
    if request.app.state.settings.expose_missing_permissions:
        errors = [
            ProblemDetailsErrorItem(
                path=None,
                message=f"Missing permission {permission}",
                code="missing_permission",
            )
            for permission in exc.missing
        ]
    return problem_response(
        request,
        status_code=status.HTTP_403_FORBIDDEN,
        detail=str(exc),
        errors=errors,
    )


def _handle_not_found(request: Request, exc: UserNotFoundError) -> JSONResponse:
    return problem_response(request, status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


def _handle_conflict(request: Request, exc: UserConflictError) -> JSONResponse:
    return problem_response(request, status_code=status.HTTP_409_CONFLICT, detail=str(exc))


def register_domain_exception_handlers(app: FastAPI) -> None:
    """Attach caller, RBAC and directory handlers to the FastAPI app."""

    app.add_exception_handler(MalformedCallerIdError, _handle_malformed_caller)
    app.add_exception_handler(UnknownCallerError, _handle_unknown_caller)
    app.add_exception_handler(PermissionDeniedError, _handle_permission_error)
    app.add_exception_handler(UserNotFoundError, _handle_not_found)
    app.add_exception_handler(UserConflictError, _handle_conflict)


__all__ = ["register_domain_exception_handlers"]
