"""HTTP middleware: request correlation and CORS."""

from __future__ import annotations

import logging
import time
from typing import Any
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from ums_api.settings import Settings

from .logging import bind_request_context, clear_request_context, log_context

logger = logging.getLogger("ums_api.request")

REQUEST_ID_HEADER = "X-Request-ID"


def new_request_id() -> str:
    return f"req_{uuid4().hex[:16]}"


def _request_fields(request: Request, started: float, status_code: int | None) -> dict[str, Any]:
    # Set by the caller dependencies once the caller is resolved.
    caller_id = getattr(request.state, "caller_id", None)
    return log_context(
        caller_id=caller_id,
        method=request.method,
        path=request.url.path,
        status_code=status_code,
        duration_ms=round((time.perf_counter() - started) * 1000.0, 2),
    )


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind a correlation id to each request and log who called what.

    The id is taken from ``X-Request-ID`` when the client sends one and is
    echoed back on the response.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
        request.state.correlation_id = request_id
        bind_request_context(request_id)
        started = time.perf_counter()
        try:
            try:
                response = await call_next(request)
            except Exception:
                logger.error("request.error", extra=_request_fields(request, started, None))
                raise
            logger.info(
                "request.complete",
                extra=_request_fields(request, started, response.status_code),
            )
        finally:
            clear_request_context()

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def register_middleware(app: FastAPI, settings: Settings) -> None:
    if settings.server_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.server_cors_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.add_middleware(RequestContextMiddleware)


__all__ = ["REQUEST_ID_HEADER", "RequestContextMiddleware", "new_request_id", "register_middleware"]
