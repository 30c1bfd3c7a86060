"""Common utilities and helpers used across the API service."""

__all__ = [
    "exceptions",
    "logging",
    "middleware",
    "problem_details",
    "schema",
]
