"""Pixel colour helpers: FNV-1a hashing, grayscale conversion and RGBA byte packing."""

from __future__ import annotations

import struct
from typing import Union

FNV_PRIME = 0x100000001B3
FNV_OFFSET = 0xCBF29CE484222325
_MASK64 = (1 << 64) - 1
_MASK32 = 0xFFFFFFFF
BYTES_PER_PIXEL = 4


def fnv_hash(data: Union[str, bytes, bytearray]) -> int:
    """Return the 64-bit FNV-1a hash of ``data``.

    Bytes above 127 are taken as signed characters and sign-extended
    before they are mixed in.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    value = FNV_OFFSET
    for byte in raw:
        signed = byte - 256 if byte >= 128 else byte
        value ^= signed & _MASK64
        value = (value * FNV_PRIME) & _MASK64
    return value


def _f32(value: float) -> float:
    """Round ``value`` to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


_WEIGHTS = tuple(_f32(weight) for weight in (0.299, 0.587, 0.114))


def rgba_to_mono(color: int) -> int:
    """Convert an RGBA colour to grayscale, keeping its alpha channel."""
    color &= _MASK32
    channels = ((color >> 24) & 0xFF, (color >> 16) & 0xFF, (color >> 8) & 0xFF)
    gray = sum(int(_f32(weight * channel)) for weight, channel in zip(_WEIGHTS, channels))
    gray &= 0xFF
    return gray << 24 | gray << 16 | gray << 8 | (color & 0xFF)


def pack_pixel(color: int) -> bytes:
    """Return the four bytes R, G, B, A of an RGBA colour."""
    return (color & _MASK32).to_bytes(BYTES_PER_PIXEL, "big")


def unpack_pixel(data: Union[bytes, bytearray, memoryview]) -> int:
    """Return the RGBA colour stored in four pixel bytes."""
    raw = bytes(data)
    if len(raw) != BYTES_PER_PIXEL:
        raise ValueError(f"a pixel is {BYTES_PER_PIXEL} bytes, got {len(raw)}")
    return int.from_bytes(raw, "big")