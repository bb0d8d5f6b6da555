"""A small printf: %c, %s, %%, %d, %i, %u, %p, %x and %X, written to a text stream."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _as_int(value: int) -> int:
    """Wrap ``value`` to a signed 32-bit integer."""
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _as_uint(value: int) -> int:
    """Wrap ``value`` to an unsigned 32-bit integer."""
    return value & _UINT_MASK


def to_hex(n: int, upper: bool = False) -> str:
    """Format a non-negative integer in hexadecimal, without a prefix."""
    if n < 0:
        raise ValueError("cannot format a negative number in hexadecimal")
    return format(n, "X" if upper else "x")


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) % 256)


def _pointer(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, int):
        return value & _POINTER_MASK
    return id(value)


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "c":
        return _char(_next_arg(values, spec))
    if spec == "s":
        value = _next_arg(values, spec)
        return "(null)" if value is None else str(value)
    if spec in ("d", "i"):
        return str(_as_int(int(_next_arg(values, spec))))
    if spec == "u":
        return str(_as_uint(int(_next_arg(values, spec))))
    if spec == "p":
        return "0x" + to_hex(_pointer(_next_arg(values, spec)))
    if spec in ("x", "X"):
        return to_hex(_as_uint(int(_next_arg(values, spec))), upper=spec == "X")
    # Unknown conversions produce nothing and take no argument.
    return ""


def format_printf(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text."""
    values = iter(args)
    parts: list[str] = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            parts.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        parts.append(_convert(spec, values))
    return "".join(parts)


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def ft_printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the expansion of ``fmt`` to ``stream`` and return the characters written."""
    text = format_printf(fmt, *args)
    _target(stream).write(text)
    return len(text)


def put_number(n: int, stream: Optional[TextIO] = None) -> None:
    """Write ``n``, taken as a 32-bit integer, in decimal."""
    _target(stream).write(str(_as_int(n)))


def put_line(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline."""
    _target(stream).write(text + "\n")