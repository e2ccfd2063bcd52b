"""String helpers: splitting, trimming, slicing and per-character mapping."""

from __future__ import annotations

from typing import Callable, Optional


def _single_char(value: str, what: str) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"{what} must be a single character, got {value!r}")
    return value


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces.

    Runs of separators, and separators at either end, produce no empty
    strings in the result.
    """
    _single_char(sep, "separator")
    return [piece for piece in text.split(sep) if piece]


def trim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substring(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end of ``text`` gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if start >= len(text):
        return ""
    return text[start:start + length]


def join(prefix: str, suffix: str) -> str:
    """Return ``prefix`` followed by ``suffix``."""
    return prefix + suffix


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    return "".join(
        _single_char(func(index, ch), "mapped value")
        for index, ch in enumerate(text)
    )


def iter_indexed(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Visit each character with its index, letting ``func`` replace it.

    ``func`` returns a replacement character, or None to keep the
    character as it was. The resulting string is returned.
    """
    chars = list(text)
    for index, ch in enumerate(text):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = _single_char(replacement, "replacement")
    return "".join(chars)