"""Reading of XPM42 images: a header, a colour table and rows of pixel keys.

The format is::

    !XPM42
    <width> <height> <colour count> <characters per pixel> <c|m>
    <key> #RRGGBBAA        (one line per colour)
    <row of keys>          (one line per pixel row)

Mode ``c`` keeps colours as written, ``m`` turns them to grayscale.
"""

from __future__ import annotations

import io
import os
import re
from dataclasses import dataclass
from typing import BinaryIO, Optional, Union

from pixelkit.colors import fnv_hash, pack_pixel, rgba_to_mono
from pixelkit.errors import ErrorCode, MlxError
from pixelkit.textures import Texture

MAGIC = b"!XPM42\n"
MAX_DIMENSION = 32767
MAX_CHARS_PER_PIXEL = 10
_TABLE_SIZE = 65535
_HEADER_LIMIT = 63
_WHITESPACE = b" \t\n\v\f\r"
_INTEGER = re.compile(rb"[ \t\n\v\f\r]*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")
_HEX_DIGITS = re.compile(rb"[0-9a-fA-F]*")


@dataclass
class Xpm:
    """A decoded XPM42 image."""

    texture: Texture
    color_count: int
    cpp: int
    mode: str


class _InvalidXpm(Exception):
    pass


def _integer(match: "re.Match[bytes]") -> int:
    sign, digits = match.group(1), match.group(2)
    if digits[:2].lower() == b"0x":
        value = int(digits[2:], 16)
    elif len(digits) > 1 and digits[:1] == b"0":
        value = int(digits, 8)
    else:
        value = int(digits, 10)
    return -value if sign == b"-" else value


def _read_header(stream: BinaryIO) -> tuple[int, int, int, int, str]:
    if stream.readline(_HEADER_LIMIT) != MAGIC:
        raise _InvalidXpm
    line = stream.readline(_HEADER_LIMIT)
    if not line:
        raise _InvalidXpm
    values = []
    pos = 0
    for _ in range(4):
        match = _INTEGER.match(line, pos)
        if match is None:
            break
        values.append(_integer(match))
        pos = match.end()
    if len(values) < 4:
        raise _InvalidXpm
    width, height, color_count, cpp = values
    mode = line[pos:].lstrip(_WHITESPACE)[:1].decode("latin-1")
    if not (0 <= width <= MAX_DIMENSION and 0 <= height <= MAX_DIMENSION):
        raise _InvalidXpm
    if mode not in ("c", "m") or not 0 <= cpp <= MAX_CHARS_PER_PIXEL:
        raise _InvalidXpm
    return width, height, color_count, cpp, mode


def _hex_channel(pair: bytes) -> int:
    """Read a two character channel the way strtol would, stopping at bad input."""
    text = pair.ljust(2, b"\0").split(b"\0", 1)[0].lstrip(_WHITESPACE)
    negative = text[:1] == b"-"
    if text[:1] in (b"+", b"-"):
        text = text[1:]
    digits = _HEX_DIGITS.match(text).group(0)
    value = int(digits, 16) if digits else 0
    return (-value if negative else value) & 0xFF


def _read_table(stream: BinaryIO, color_count: int, cpp: int, mode: str) -> dict[int, int]:
    table: dict[int, int] = {}
    for _ in range(max(color_count, 0)):
        line = stream.readline()
        if not line:
            raise _InvalidXpm
        if line.rfind(b" ") != cpp:
            raise _InvalidXpm
        if line[cpp + 1 : cpp + 2] != b"#" or not line[cpp + 2 : cpp + 3].isalnum():
            raise _InvalidXpm
        start = cpp + 2
        color = 0
        for shift in (24, 16, 8, 0):
            color |= _hex_channel(line[start : start + 2]) << shift
            start += 2
        table[fnv_hash(line[:cpp]) % _TABLE_SIZE] = rgba_to_mono(color) if mode == "m" else color
    return table


def _read_rows(stream: BinaryIO, width: int, height: int, cpp: int, table: dict[int, int]) -> bytearray:
    pixels = bytearray()
    for _ in range(height):
        line = stream.readline()
        if not line:
            raise _InvalidXpm
        if line.endswith(b"\n"):
            line = line[:-1]
        if len(line) != width * cpp:
            raise _InvalidXpm
        for x in range(width):
            key = line[x * cpp : (x + 1) * cpp]
            pixels += pack_pixel(table.get(fnv_hash(key) % _TABLE_SIZE, 0))
    return pixels


def _parse_stream(stream: BinaryIO) -> Xpm:
    try:
        width, height, color_count, cpp, mode = _read_header(stream)
        table = _read_table(stream, color_count, cpp, mode)
        pixels = _read_rows(stream, width, height, cpp, table)
    except _InvalidXpm:
        raise MlxError(ErrorCode.INVXPM) from None
    return Xpm(Texture(width, height, pixels), color_count, cpp, mode)


def parse_xpm42(text: Union[str, bytes]) -> Xpm:
    """Decode XPM42 content; raise MlxError(INVXPM) if it is malformed."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    return _parse_stream(io.BytesIO(data))


def load_xpm42(path: Union[str, "os.PathLike[str]"]) -> Xpm:
    """Read and decode an XPM42 file."""
    name = os.fspath(path)
    if ".xpm42" not in name:
        raise MlxError(ErrorCode.INVEXT)
    stream: Optional[BinaryIO] = None
    try:
        stream = open(name, "rb")
    except OSError as err:
        raise MlxError(ErrorCode.INVFILE) from err
    with stream:
        return _parse_stream(stream)