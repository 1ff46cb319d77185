"""Validation and parsing of the integers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_MAX_LENGTH = 11


class InputError(ValueError):
    """Raised when the arguments are not a valid list of distinct integers."""


def _leading_value(text: str) -> int:
    """Read an optional sign and the digits that follow it, as ``atol`` does."""
    negative = text.startswith("-")
    rest = text[1:] if negative or text.startswith("+") else text
    digits = ""
    for char in rest:
        if not char.isascii() or not char.isdigit():
            break
        digits += char
    value = int(digits) if digits else 0
    return -value if negative else value


def parse_int(text: str) -> int:
    """Return the integer written in ``text``.

    The text may hold only ASCII digits and minus signs, be at most eleven
    characters long, and its leading value must fit in a 32-bit signed
    integer. Raises InputError otherwise.
    """
    if len(text) > _MAX_LENGTH:
        raise InputError(f"argument too long: {text!r}")
    if any(char != "-" and not ("0" <= char <= "9") for char in text):
        raise InputError(f"not an integer: {text!r}")
    value = _leading_value(text)
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"out of range: {text!r}")
    return value


def is_int(text: str) -> bool:
    """Return True if ``text`` is accepted by :func:`parse_int`."""
    try:
        parse_int(text)
    except InputError:
        return False
    return True


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Parse every argument, first argument first, rejecting duplicates.

    Raises InputError if an argument is not an integer or if two arguments
    have the same value.
    """
    args = list(args)
    for text in args:
        parse_int(text)
    values = [parse_int(text) for text in args]
    if len(set(values)) != len(values):
        raise InputError("duplicate values")
    return values