"""Problem Details helpers for consistent API error responses."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import Field

from .logging import current_correlation_id
from .schema import BaseSchema

HTTP_422_UNPROCESSABLE = 422


@dataclass(frozen=True)
class ErrorDefinition:
    """Canonical Problem Details error metadata."""

    type: str
    title: str
    status: int


ERROR_DEFINITIONS: dict[str, ErrorDefinition] = {
    "bad_request": ErrorDefinition(
        type="bad_request",
        title="Bad request",
        status=status.HTTP_400_BAD_REQUEST,
    ),
    "unauthorized": ErrorDefinition(
        type="unauthorized",
        title="Unauthorized",
        status=status.HTTP_401_UNAUTHORIZED,
    ),
    "forbidden": ErrorDefinition(
        type="forbidden",
        title="Forbidden",
        status=status.HTTP_403_FORBIDDEN,
    ),
    "not_found": ErrorDefinition(
        type="not_found",
        title="Not found",
        status=status.HTTP_404_NOT_FOUND,
    ),
    "method_not_allowed": ErrorDefinition(
        type="method_not_allowed",
        title="Method not allowed",
        status=status.HTTP_405_METHOD_NOT_ALLOWED,
    ),
    "conflict": ErrorDefinition(
        type="conflict",
        title="Conflict",
        status=status.HTTP_409_CONFLICT,
    ),
    "validation_error": ErrorDefinition(
        type="validation_error",
        title="Validation error",
        status=HTTP_422_UNPROCESSABLE,
    ),
    "internal_error": ErrorDefinition(
        type="internal_error",
        title="Internal server error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    ),
}

STATUS_TO_ERROR_TYPE: dict[int, ErrorDefinition] = {
    definition.status: definition for definition in ERROR_DEFINITIONS.values()
}


class ProblemDetailsErrorItem(BaseSchema):
    """Structured error detail used for validation-style responses."""

    path: str | None = None
    message: str
    code: str | None = None


class ProblemDetails(BaseSchema):
    """Problem Details-style response payload."""

    type: str
    title: str
    status: int
    detail: str | None = None
    instance: str
    request_id: str | None = Field(default=None, alias="requestId")
    errors: list[ProblemDetailsErrorItem] | None = None


def resolve_error_definition(status_code: int) -> ErrorDefinition:
    """Return the canonical error definition for ``status_code``."""

    return STATUS_TO_ERROR_TYPE.get(
        status_code,
        ErrorDefinition(type="error", title="Error", status=status_code),
    )


def format_error_path(loc: Iterable[Any] | None) -> str | None:
    """Convert a Pydantic-style loc tuple/list into a dotted path."""

    if not loc:
        return None
    parts: list[str] = []
    for entry in loc:
        if entry in {"body", "query", "path", "header", "cookie"}:
            continue
        if isinstance(entry, int):
            if not parts:
                parts.append(f"[{entry}]")
            else:
                parts[-1] = f"{parts[-1]}[{entry}]"
            continue
        parts.append(str(entry))
    if not parts:
        return None
    return ".".join(parts)


def error_items_from_pydantic(errors: Iterable[dict[str, Any]]) -> list[ProblemDetailsErrorItem]:
    """Convert Pydantic error dicts into Problem Details error items."""

    items: list[ProblemDetailsErrorItem] = []
    for entry in errors:
        loc = entry.get("loc")
        message = entry.get("msg") or "Invalid value"
        code = entry.get("type")
        items.append(
            ProblemDetailsErrorItem(
                path=format_error_path(loc) if isinstance(loc, (list, tuple)) else None,
                message=str(message),
                code=str(code) if code else None,
            )
        )
    return items


def build_problem_details(
    *,
    status_code: int,
    instance: str,
    request_id: str | None,
    detail: str | None = None,
    errors: list[ProblemDetailsErrorItem] | None = None,
    error_type: str | None = None,
    title: str | None = None,
) -> ProblemDetails:
    """Construct a Problem Details payload."""

    definition = resolve_error_definition(status_code)
    return ProblemDetails(
        type=error_type or definition.type,
        title=title or definition.title,
        status=status_code,
        detail=detail,
        instance=instance,
        request_id=request_id,
        errors=errors,
    )


def problem_response(
    request: Request,
    *,
    status_code: int,
    detail: str | None = None,
    errors: list[ProblemDetailsErrorItem] | None = None,
    error_type: str | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Render a Problem Details JSON response for ``request``."""

    request_id = getattr(request.state, "correlation_id", None) or current_correlation_id()
    payload = build_problem_details(
        status_code=status_code,
        instance=str(request.url.path),
        request_id=request_id,
        detail=detail,
        errors=errors,
        error_type=error_type,
    )
    return JSONResponse(
        status_code=status_code,
        content=payload.serializable_dict(),
        headers=headers,
        media_type="application/problem+json",
    )


__all__ = [
    "ERROR_DEFINITIONS",
    "ProblemDetails",
    "ProblemDetailsErrorItem",
    "build_problem_details",
    "error_items_from_pydantic",
    "format_error_path",
    "problem_response",
    "resolve_error_definition",
]
