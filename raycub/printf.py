"""Formatted output with a small set of conversions, and plain output helpers."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO, Union

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_CONVERSIONS = frozenset("cspdiuxX%")
_UINT32 = 1 << 32
_UINTPTR = 1 << 64
_MISSING = object()


def _int32(value: Any) -> int:
    """Wrap ``value`` to a signed 32-bit integer."""
    n = int(value) % _UINT32
    return n - _UINT32 if n >= _UINT32 // 2 else n


def _uint32(value: Any) -> int:
    """Wrap ``value`` to an unsigned 32-bit integer."""
    return int(value) % _UINT32


def _in_base(n: int, digits: str) -> str:
    radix = len(digits)
    out = []
    while True:
        n, rem = divmod(n, radix)
        out.append(digits[rem])
        if n == 0:
            break
    return "".join(reversed(out))


def _char(value: Union[str, int]) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) % 256)


def _pointer(value: Optional[int]) -> str:
    if value is None:
        return "(nil)"
    address = int(value) % _UINTPTR
    if address == 0:
        return "(nil)"
    return "0x" + _in_base(address, _HEX_LOWER)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    value = next(args, _MISSING)
    if value is _MISSING:
        raise TypeError(f"not enough arguments for conversion %{spec}")
    if spec == "c":
        return _char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "di":
        return str(_int32(value))
    if spec == "u":
        return str(_uint32(value))
    if spec == "p":
        return _pointer(value)
    if spec == "x":
        return _in_base(_uint32(value), _HEX_LOWER)
    return _in_base(_uint32(value), _HEX_UPPER)


def render(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text.

    Supported conversions are %c %s %p %d %i %u %x %X and %%. A '%' that
    is not followed by one of these is kept as an ordinary character.
    Missing arguments raise TypeError; extra arguments are ignored.
    """
    arg_iter = iter(args)
    pieces: list[str] = []
    i = 0
    while i < len(fmt):
        ch = fmt[i]
        if ch == "%" and i + 1 < len(fmt) and fmt[i + 1] in _CONVERSIONS:
            pieces.append(_convert(fmt[i + 1], arg_iter))
            i += 2
        else:
            pieces.append(ch)
            i += 1
    return "".join(pieces)


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the expansion of ``fmt`` to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = render(fmt, *args)
    _target(stream).write(text)
    return len(text)


def put_char(c: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write a single character."""
    _target(stream).write(_char(c))


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text``; None writes nothing."""
    if text is None:
        return
    _target(stream).write(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline; None writes nothing."""
    if text is None:
        return
    _target(stream).write(text + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal text of ``n``."""
    _target(stream).write(str(int(n)))