"""Bounded searching, comparison and copying over strings and bytes."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional

_TERMINATOR = "\0"


def _non_negative(value: int, what: str) -> int:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")
    return value


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def find_char(text: str, c: str) -> Optional[int]:
    """Return the index of the first ``c`` in ``text``, or None.

    Searching for the terminator character '\\0' finds the end of the
    text, so its index is ``len(text)``.
    """
    _single_char(c)
    index = text.find(c)
    if index >= 0:
        return index
    if c == _TERMINATOR:
        return len(text)
    return None


def rfind_char(text: str, c: str) -> Optional[int]:
    """Return the index of the last ``c`` in ``text``, or None.

    Searching for the terminator character '\\0' finds the end of the
    text, so its index is ``len(text)``.
    """
    _single_char(c)
    if c == _TERMINATOR:
        return len(text)
    index = text.rfind(c)
    return index if index >= 0 else None


def find_bounded(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    The whole match must lie inside that window. An empty needle is found
    at index 0. Returns the index of the match, or None.
    """
    _non_negative(length, "length")
    if not needle:
        return 0
    index = haystack.find(needle, 0, min(length, len(haystack)))
    return index if index >= 0 else None


def compare_n(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the code points at the first position where
    they differ, treating the end of a string as code point 0, or 0 if the
    compared parts are equal. Comparison also stops at a '\\0' character.
    """
    _non_negative(n, "n")
    pairs = zip_longest(first, second, fillvalue=_TERMINATOR)
    for a, b in islice(pairs, n):
        if a != b or a == _TERMINATOR:
            return ord(a) - ord(b)
    return 0


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the length of ``src``; the copy was
    truncated when that length is at least ``size``.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def bounded_concat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have had. When ``dest`` already fills the buffer nothing is appended
    and the reported length is ``size + len(src)``.
    """
    _non_negative(size, "size")
    dest_len = len(dest)
    if dest_len >= size:
        return dest, size + len(src)
    room = size - 1 - dest_len
    return dest + src[:room], dest_len + len(src)


def _check_span(data: bytes, n: int) -> None:
    _non_negative(n, "n")
    if n > len(data):
        raise ValueError(f"n ({n}) exceeds the data length ({len(data)})")


def find_byte(data: bytes, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` in ``data[:n]``.

    ``value`` is reduced to an unsigned byte first. Returns None when the
    byte is not present.
    """
    _check_span(data, n)
    index = bytes(data).find(value & 0xFF, 0, n)
    return index if index >= 0 else None


def compare_bytes(first: bytes, second: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first differing bytes, or 0.
    """
    _check_span(first, n)
    _check_span(second, n)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0