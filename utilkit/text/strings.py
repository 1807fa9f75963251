"""Small string and sequence helpers."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from enum import Enum
from typing import Any, TypeVar

T = TypeVar("T")


def to_safe_string(value: Any) -> str:
    """``str(value)``, or an empty string for ``None``."""
    return "" if value is None else str(value)


def left(text: str, length: int) -> str:
    """Return the first *length* characters (the whole string if shorter)."""
    return text[:length] if length > 0 else ""


def right(text: str, length: int) -> str:
    """Return the last *length* characters (the whole string if shorter)."""
    return text[-length:] if length > 0 else ""


def reverse(text: str) -> str:
    return text[::-1]


def chunked(items: Sequence[T], size: int) -> Iterator[list[T]]:
    """Yield consecutive chunks of *size* items; the last may be shorter."""
    if size <= 0:
        raise ValueError("Chunk size must be positive")
    for start in range(0, len(items), size):
        yield list(items[start : start + size])


def enum_value_string(member: Enum) -> str:
    """Return the integer value of an enum member as text."""
    return str(int(member.value))
