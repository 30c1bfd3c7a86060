from __future__ import annotations

import pytest

from ums_api.core.auth import MalformedCallerIdError, parse_caller_id
from ums_api.core.auth.caller import MAX_CALLER_ID_DIGITS


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1", 1),
        ("42", 42),
        (" 7 ", 7),
        ("0", 0),
        ("007", 7),
        (3, 3),
    ],
)
def test_parse_caller_id_accepts_non_negative_integers(raw, expected) -> None:
    assert parse_caller_id(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [None, "", "   ", "abc", "-1", "+1", "1.5", "1e3", "１", -4, True, 2.0],
)
def test_parse_caller_id_rejects_malformed_values(raw) -> None:
    with pytest.raises(MalformedCallerIdError) as excinfo:
        parse_caller_id(raw)

    assert excinfo.value.raw == raw


@pytest.mark.parametrize("raw", ["9" * 5000, "1" * (MAX_CALLER_ID_DIGITS + 1)])
def test_parse_caller_id_rejects_overlong_digit_strings(raw: str) -> None:
    with pytest.raises(MalformedCallerIdError):
        parse_caller_id(raw)


def test_parse_caller_id_accepts_longest_allowed_value() -> None:
    raw = "9" * MAX_CALLER_ID_DIGITS

    assert parse_caller_id(raw) == int(raw)
