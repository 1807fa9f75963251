"""Integer conversion to and from arbitrary positional alphabets."""

from __future__ import annotations

BASE2 = "01"
BASE10 = "0123456789"
BASE16 = "0123456789ABCDEF"
BASE36 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
BASE62 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

ALPHABETS: dict[int, str] = {
    2: BASE2,
    10: BASE10,
    16: BASE16,
    36: BASE36,
    62: BASE62,
}


def _check_alphabet(alphabet: str) -> None:
    if len(alphabet) < 2 or len(set(alphabet)) != len(alphabet):
        raise ValueError("Alphabet must have at least two distinct characters")
    if "-" in alphabet:
        raise ValueError("Alphabet must not contain '-'")


def from_int(value: int, alphabet: str) -> str:
    """Encode *value* using *alphabet* as digits, most significant first.

    Negative values get a leading ``-``.
    """
    _check_alphabet(alphabet)
    base = len(alphabet)

    if value == 0:
        return alphabet[0]

    negative = value < 0
    value = abs(value)
    digits: list[str] = []
    while value:
        value, rem = divmod(value, base)
        digits.append(alphabet[rem])

    if negative:
        digits.append("-")
    return "".join(reversed(digits))


def to_int(text: str, alphabet: str) -> int:
    """Decode *text* written in *alphabet*.

    Raises:
        ValueError: If *text* is empty or contains characters outside *alphabet*.
    """
    _check_alphabet(alphabet)
    if not text:
        raise ValueError("Cannot decode an empty string")

    negative = text[0] == "-"
    digits = text[1:] if negative else text
    if not digits:
        raise ValueError("Cannot decode a bare sign")

    base = len(alphabet)
    result = 0
    for char in digits:
        pos = alphabet.find(char)
        if pos == -1:
            raise ValueError(f"Invalid character {char!r} for alphabet")
        result = result * base + pos

    return -result if negative else result


def add(number: str, operand: int, alphabet: str) -> str:
    return from_int(to_int(number, alphabet) + operand, alphabet)


def subtract(number: str, operand: int, alphabet: str) -> str:
    return from_int(to_int(number, alphabet) - operand, alphabet)


def multiply(number: str, operand: int, alphabet: str) -> str:
    return from_int(to_int(number, alphabet) * operand, alphabet)


def divide(number: str, operand: int, alphabet: str) -> str:
    """Divide, truncating toward zero like integer division in C."""
    if operand == 0:
        raise ZeroDivisionError("division by zero")
    value = to_int(number, alphabet)
    quotient = abs(value) // abs(operand)
    if (value < 0) != (operand < 0):
        quotient = -quotient
    return from_int(quotient, alphabet)
