"""Small text helpers: number parsing and formatting, splitting, trimming, searching."""

from __future__ import annotations

from itertools import chain, islice, repeat
from typing import Iterator, Optional, Union

_WHITESPACE = frozenset("\f\n\r\t\v ")
_INT_BITS = 32


def is_space(char: str) -> bool:
    """Return True if ``char`` is one of form feed, newline, return, tab, vtab or space."""
    return char in _WHITESPACE and len(char) == 1


def _wrap_int(value: int) -> int:
    """Wrap ``value`` to a signed 32-bit integer."""
    modulus = 1 << _INT_BITS
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as a C ``int``.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Text with no digits gives 0.
    The result wraps around like a 32-bit integer.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] == "-":
        sign = -1
    if rest[:1] in ("-", "+") and rest:
        rest = rest[1:]
    value = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
    return _wrap_int(value * sign)


def atof(text: str) -> float:
    """Parse a decimal number whose fraction follows a '.' or, failing that, a ','.

    The integer part is read with :func:`atoi`; the fraction is read with
    :func:`atoi` too and scaled down once for every character after the
    separator. A leading "-0" keeps the sign of negative values below one.
    """
    whole = atoi(text)
    pos = text.find(".")
    if pos < 0:
        pos = text.find(",")
    if pos < 0:
        return float(whole)
    fraction_text = text[pos + 1 :]
    fraction = float(atoi(fraction_text))
    for _ in fraction_text:
        fraction /= 10
    if whole < 0 or (text[:1] == "-" and text[1:2] == "0"):
        return whole - fraction
    return whole + fraction


def itoa(n: int) -> str:
    """Format an integer in decimal, with a leading '-' when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in ``charset``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[str]:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the rest of ``haystack`` from the first match, the whole of
    ``haystack`` for an empty needle, or None when there is no match.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return haystack
    limit = min(length, len(haystack))
    index = haystack.find(needle, 0, limit)
    return haystack[index:] if index >= 0 else None


def _units(value: Union[str, bytes]) -> Iterator[int]:
    data = value.encode("utf-8") if isinstance(value, str) else bytes(value)
    return chain(data, repeat(0))


def strncmp(first: Union[str, bytes], second: Union[str, bytes], n: int) -> int:
    """Compare at most ``n`` bytes of two strings.

    Returns the difference of the first pair of bytes that differ, or 0
    when the compared parts are equal. Comparison stops at the end of
    either string.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for a, b in islice(zip(_units(first), _units(second)), n):
        if a != b or a == 0:
            return a - b
    return 0