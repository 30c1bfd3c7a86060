"""Process-wide console logging for the UMS API.

Every record becomes one line::

    2026-10-19T09:12:44.021Z INFO  ums_api.features.rbac.service [cid=req_1a2b] authz.deny caller_id=6 missing=CREATE

Fields passed through ``extra=log_context(...)`` are appended as ``key=value``
pairs. The correlation id comes from the request being served, bound by
:class:`~ums_api.common.middleware.RequestContextMiddleware`.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

from ums_api.settings import Settings

_correlation_id: ContextVar[str | None] = ContextVar("ums_correlation_id", default=None)

# Attributes every LogRecord carries; anything else on a record is an extra.
_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {
    "message",
    "asctime",
    "correlation_id",
    "taskName",
}

_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _render(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(str(item) for item in value) or "-"
    return str(value)


class ConsoleLogFormatter(logging.Formatter):
    """Single-line formatter: UTC time, level, logger, correlation id, event, extras."""

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        stamp = datetime.fromtimestamp(record.created, tz=UTC)
        return f"{stamp:%Y-%m-%dT%H:%M:%S}.{int(record.msecs):03d}Z"

    def format(self, record: logging.LogRecord) -> str:
        record.correlation_id = (
            getattr(record, "correlation_id", None) or _correlation_id.get() or "-"
        )
        fields = [
            f"{key}={_render(value)}"
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        ]
        line = " ".join(
            [
                self.formatTime(record),
                f"{record.levelname:<5}",
                record.name,
                f"[cid={record.correlation_id}]",
                record.getMessage(),
                *fields,
            ]
        )
        if record.exc_info:
            record.exc_text = record.exc_text or self.formatException(record.exc_info)
        if record.exc_text:
            line = f"{line}\n{record.exc_text}"
        return line


def setup_logging(settings: Settings) -> None:
    """Point the root logger at one console handler at ``UMS_LOGGING_LEVEL``.

    Safe to call per app instance: the handler is installed once per process,
    later calls only change the level.
    """

    level = logging.getLevelName(settings.logging_level)
    if not isinstance(level, int):
        level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)
    if any(isinstance(h.formatter, ConsoleLogFormatter) for h in root.handlers):
        return

    handler = logging.StreamHandler()
    handler.setFormatter(ConsoleLogFormatter())
    root.handlers = [handler]

    for name in _UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True


def bind_request_context(correlation_id: str | None) -> None:
    _correlation_id.set(correlation_id)


def clear_request_context() -> None:
    _correlation_id.set(None)


def current_correlation_id() -> str | None:
    return _correlation_id.get()


def log_context(
    *,
    user_id: int | str | None = None,
    caller_id: int | str | None = None,
    **extra: Any,
) -> dict[str, Any]:
    """Build the ``extra`` mapping for a structured log call.

    ``user_id`` and ``caller_id`` are left out when unknown; other fields are
    passed through as given.
    """

    ids = {"user_id": user_id, "caller_id": caller_id}
    return {**{key: value for key, value in ids.items() if value is not None}, **extra}


__all__ = [
    "ConsoleLogFormatter",
    "bind_request_context",
    "clear_request_context",
    "current_correlation_id",
    "log_context",
    "setup_logging",
]
