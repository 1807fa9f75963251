"""Hex string <-> bytes conversion."""

from __future__ import annotations


def bytes_to_hex(data: bytes) -> str:
    """Return *data* as uppercase hex digits with no separators."""
    return data.hex().upper()


def hex_value(char: str) -> int:
    """Return the value of a single hex digit.

    Raises:
        ValueError: If *char* is not ``0-9``, ``a-f`` or ``A-F``.
    """
    if len(char) == 1:
        if "0" <= char <= "9":
            return ord(char) - ord("0")
        if "A" <= char <= "F":
            return ord(char) - ord("A") + 10
        if "a" <= char <= "f":
            return ord(char) - ord("a") + 10
    raise ValueError(f"Invalid hex digit: {char!r}")


def hex_to_bytes(text: str) -> bytes:
    """Decode a string of hex digit pairs.

    Raises:
        ValueError: On an odd number of digits or an invalid digit.
    """
    if len(text) % 2 == 1:
        raise ValueError("Hex string must have an even number of digits")
    if any(char.isspace() for char in text):
        raise ValueError(f"Invalid hex digit in {text!r}")
    try:
        return bytes.fromhex(text)
    except ValueError as e:
        raise ValueError(f"Invalid hex digit in {text!r}") from e
