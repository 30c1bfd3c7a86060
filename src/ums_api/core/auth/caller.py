"""Parsing of the raw caller identifier supplied by the transport layer."""

from __future__ import annotations

import re

from .errors import MalformedCallerIdError

_CALLER_ID_PATTERN = re.compile(r"[0-9]+")

# Longer inputs are rejected before int() sees them.
MAX_CALLER_ID_DIGITS = 32


def parse_caller_id(raw: str | int | None) -> int:
    """Return the caller id encoded in ``raw``.

    Accepts a non-negative ``int`` or a string of ASCII digits; surrounding
    whitespace is ignored and at most ``MAX_CALLER_ID_DIGITS`` digits are
    accepted. Anything else raises :class:`MalformedCallerIdError`.
    """

    if isinstance(raw, bool):
        raise MalformedCallerIdError(raw)
    if isinstance(raw, int):
        if raw < 0:
            raise MalformedCallerIdError(raw)
        return raw
    if not isinstance(raw, str):
        raise MalformedCallerIdError(raw)

    candidate = raw.strip()
    if len(candidate) > MAX_CALLER_ID_DIGITS or not _CALLER_ID_PATTERN.fullmatch(candidate):
        raise MalformedCallerIdError(raw)
    return int(candidate)


__all__ = ["MAX_CALLER_ID_DIGITS", "parse_caller_id"]
