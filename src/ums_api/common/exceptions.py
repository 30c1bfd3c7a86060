"""Centralized FastAPI exception handlers with structured logging."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .logging import log_context
from .problem_details import (
    HTTP_422_UNPROCESSABLE,
    error_items_from_pydantic,
    problem_response,
)

_UNHANDLED_LOGGER = logging.getLogger("ums_api.errors")
_HTTP_LOGGER = logging.getLogger("ums_api.http")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected exceptions.

    Registered as the ``Exception`` handler. Ensures that any unhandled error
    results in:

    * a Problem Details response with HTTP 500, and
    * a structured ERROR log including a stack trace.
    """
    _UNHANDLED_LOGGER.exception(
        "unhandled_exception",
        extra=log_context(
            path=str(request.url.path),
            method=request.method,
            exception_type=type(exc).__name__,
            detail=str(exc),
        ),
    )

    return problem_response(request, status_code=500, detail="Internal server error")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handler for HTTPException instances.

    4xx responses (client errors) are returned without logging by default.
    5xx responses are logged at ERROR level with structured metadata.
    """
    if exc.status_code >= 500:
        _HTTP_LOGGER.error(
            "http_exception",
            extra=log_context(
                path=str(request.url.path),
                method=request.method,
                status_code=exc.status_code,
                detail=exc.detail,
            ),
        )

    detail = exc.detail if isinstance(exc.detail, str) else None
    return problem_response(
        request,
        status_code=exc.status_code,
        detail=detail,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Render request validation failures as Problem Details with error items."""

    return problem_response(
        request,
        status_code=HTTP_422_UNPROCESSABLE,
        detail="Request validation failed.",
        errors=error_items_from_pydantic(exc.errors()),
    )


def register_common_exception_handlers(app: FastAPI) -> None:
    """Attach the generic HTTP, validation and catch-all handlers."""

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = [
    "http_exception_handler",
    "register_common_exception_handlers",
    "unhandled_exception_handler",
    "validation_exception_handler",
]
