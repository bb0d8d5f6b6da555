"""Textures: raw RGBA pixel data that can be copied into images."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from pixelkit.colors import BYTES_PER_PIXEL
from pixelkit.context import Mlx
from pixelkit.errors import ErrorCode, MlxError
from pixelkit.image import Image


@dataclass
class Texture:
    """A width by height block of RGBA pixels, four bytes each."""

    width: int
    height: int
    pixels: Optional[Union[bytes, bytearray]] = None
    bytes_per_pixel: int = field(default=BYTES_PER_PIXEL, init=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("texture dimensions must not be negative")
        size = self.width * self.height * self.bytes_per_pixel
        if self.pixels is None:
            self.pixels = bytearray(size)
            return
        self.pixels = bytearray(self.pixels)
        if len(self.pixels) != size:
            raise ValueError(
                f"a {self.width}x{self.height} texture holds {size} bytes, got {len(self.pixels)}"
            )


def texture_area_to_image(
    mlx: Mlx, texture: Texture, xy: Sequence[int], wh: Sequence[int]
) -> Image:
    """Copy the ``wh`` sized area of ``texture`` starting at ``xy`` into a new image."""
    x, y = xy
    width, height = wh
    if width < 0 or height < 0 or width > texture.width or height > texture.height:
        raise MlxError(ErrorCode.INVDIM)
    if x < 0 or y < 0 or x > texture.width or y > texture.height:
        raise MlxError(ErrorCode.INVPOS)
    if x + width > texture.width or y + height > texture.height:
        raise MlxError(ErrorCode.INVPOS)
    try:
        image = mlx.new_image(width, height)
    except MlxError as err:
        raise MlxError(ErrorCode.MEMFAIL) from err

    bpp = texture.bytes_per_pixel
    row_bytes = width * bpp
    for row in range(height):
        source = ((y + row) * texture.width + x) * bpp
        target = row * row_bytes
        image.pixels[target : target + row_bytes] = texture.pixels[source : source + row_bytes]
    return image


def texture_to_image(mlx: Mlx, texture: Texture) -> Image:
    """Copy the whole of ``texture`` into a new image."""
    try:
        return texture_area_to_image(mlx, texture, (0, 0), (texture.width, texture.height))
    except MlxError as err:
        raise MlxError(ErrorCode.MEMFAIL) from err


def draw_texture(image: Image, texture: Texture, x: int, y: int) -> None:
    """Copy ``texture`` onto ``image`` with its top left corner at (x, y)."""
    if texture.width > image.width or texture.height > image.height:
        raise MlxError(ErrorCode.INVDIM)
    if x < 0 or y < 0 or x > image.width or y > image.height:
        raise MlxError(ErrorCode.INVPOS)
    if x + texture.width > image.width or y + texture.height > image.height:
        raise MlxError(ErrorCode.INVPOS)

    bpp = texture.bytes_per_pixel
    row_bytes = texture.width * bpp
    for row in range(texture.height):
        source = row * row_bytes
        target = ((row + y) * image.width + x) * bpp
        image.pixels[target : target + row_bytes] = texture.pixels[source : source + row_bytes]