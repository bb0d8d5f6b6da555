"""Images: RGBA pixel buffers that can be shown at one or more positions."""

from __future__ import annotations

from dataclasses import dataclass

from pixelkit.colors import BYTES_PER_PIXEL, pack_pixel, unpack_pixel
from pixelkit.errors import ErrorCode, MlxError

MAX_DIMENSION = 32767


@dataclass
class Instance:
    """One placement of an image in the window."""

    x: int
    y: int
    z: int = 0
    enabled: bool = True


def _check_dimensions(width: int, height: int) -> None:
    if not (0 < width <= MAX_DIMENSION and 0 < height <= MAX_DIMENSION):
        raise MlxError(ErrorCode.INVDIM)


class Image:
    """A width by height buffer of RGBA pixels, four bytes each."""

    def __init__(self, width: int, height: int) -> None:
        _check_dimensions(width, height)
        self.width = width
        self.height = height
        self.pixels = bytearray(width * height * BYTES_PER_PIXEL)
        self.instances: list[Instance] = []
        self.enabled = True

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height}, instances={len(self.instances)})"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError("Pixel is out of bounds")
        return (y * self.width + x) * BYTES_PER_PIXEL

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at (x, y) to an RGBA colour."""
        start = self._offset(x, y)
        self.pixels[start : start + BYTES_PER_PIXEL] = pack_pixel(color)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the RGBA colour of the pixel at (x, y)."""
        start = self._offset(x, y)
        return unpack_pixel(self.pixels[start : start + BYTES_PER_PIXEL])

    def resize(self, width: int, height: int) -> None:
        """Change the image size; the buffer keeps its leading bytes."""
        _check_dimensions(width, height)
        if width == self.width and height == self.height:
            return
        size = width * height * BYTES_PER_PIXEL
        kept = self.pixels[:size]
        self.pixels = kept + bytearray(size - len(kept))
        self.width = width
        self.height = height

    def fill(self, value: int) -> None:
        """Set every byte of the pixel buffer to ``value``."""
        if not 0 <= value <= 255:
            raise ValueError("fill value must be a byte")
        self.pixels[:] = bytes([value]) * len(self.pixels)