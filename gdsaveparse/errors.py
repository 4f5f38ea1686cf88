"""Error type and validation helpers shared by the save-file readers."""

from __future__ import annotations

from typing import Iterable, TypeVar

T = TypeVar("T")


class ParseError(Exception):
    """Raised when the data does not match the expected save-file layout."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Error: {self.message}"


def ensure_eq(actual: T, expected: T, message: str) -> T:
    """Return ``actual`` if it equals ``expected``, otherwise raise ParseError."""
    if actual != expected:
        raise ParseError(f"{message}: expected {expected}, found {actual}")
    return actual


def ensure_contains(actual: T, expected: Iterable[T], message: str) -> T:
    """Return ``actual`` if it is one of ``expected``, otherwise raise ParseError."""
    allowed = list(expected)
    if actual not in allowed:
        raise ParseError(f"{message}: expected {allowed}, found {actual}")
    return actual