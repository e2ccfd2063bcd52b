"""Character classification and integer/text conversion helpers."""

from __future__ import annotations

from typing import Optional, Union

CharLike = Union[str, int]

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(c: CharLike) -> int:
    """Return the code point of a one-character string, or ``c`` itself."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def is_alpha(c: CharLike) -> bool:
    """Tell whether ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: CharLike) -> bool:
    """Tell whether ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """Tell whether ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """Tell whether ``c`` lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """Tell whether ``c`` is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _convert_case(c: CharLike, low: str, high: str, shift: int) -> CharLike:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Turn an ASCII lower-case letter into upper case; leave anything else alone."""
    return _convert_case(c, "a", "z", -32)


def to_lower(c: CharLike) -> CharLike:
    """Turn an ASCII upper-case letter into lower case; leave anything else alone."""
    return _convert_case(c, "A", "Z", 32)


def atoi(text: str) -> int:
    """Parse the leading integer of ``text``.

    Leading whitespace is skipped, one optional sign is accepted, and
    digits are read until the first non-digit. Returns 0 when no digits
    are found.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not is_digit(ch):
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return result * sign


def itoa(n: int) -> str:
    """Return the decimal text of ``n``."""
    digits = str(abs(n))
    return "-" + digits if n < 0 else digits


def check_base(base: Optional[str]) -> int:
    """Return the radix of a digit alphabet, or 0 if it is unusable.

    A usable alphabet has at least two characters, all printable ASCII,
    none of them '+' or '-', and none repeated.
    """
    if not base or len(base) < 2:
        return 0
    seen: set[str] = set()
    for ch in base:
        if ch in "+-" or not is_print(ch) or ch in seen:
            return 0
        seen.add(ch)
    return len(base)