"""Validation and parsing of the numbers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = frozenset(chr(code) for code in (9, 10, 11, 12, 13, 32))
_ALLOWED = frozenset("0123456789+- ")


class InputError(ValueError):
    """Raised when the input is not a list of distinct 32-bit integers."""


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def parse_number(text: str) -> int:
    """Parse one token: optional leading whitespace, an optional sign, digits.

    Raises InputError when there is no digit after the sign or when anything
    follows the digits.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and _is_digit(text[pos]):
        pos += 1
    if pos == start:
        raise InputError(f"not a number: {text!r}")
    if pos != length:
        raise InputError(f"trailing characters in {text!r}")
    return sign * int(text[start:pos])


def is_sanitized(args: Iterable[str]) -> bool:
    """Return True if every token is a well-formed number in the int range."""
    for token in args:
        try:
            value = parse_number(token)
        except InputError:
            return False
        if not INT_MIN <= value <= INT_MAX:
            return False
    return True


def has_duplicates(args: Iterable[str]) -> bool:
    """Return True if two tokens denote the same number."""
    seen: set[int] = set()
    for token in args:
        value = parse_number(token)
        if value in seen:
            return True
        seen.add(value)
    return False


def sanitize_entry(argv: Sequence[str]) -> list[int]:
    """Split the arguments on spaces and return the numbers they hold.

    Raises InputError for a character other than a digit, a sign or a space,
    for a malformed or out-of-range number, and for a repeated number.
    """
    for arg in argv:
        if any(char not in _ALLOWED for char in arg):
            raise InputError(f"invalid character in {arg!r}")
    tokens = [piece for piece in " ".join(argv).split(" ") if piece]
    if not is_sanitized(tokens):
        raise InputError("malformed or out-of-range number")
    if has_duplicates(tokens):
        raise InputError("duplicate number")
    return [parse_number(token) for token in tokens]