import pytest

from pixelkit.colors import pack_pixel
from pixelkit.context import Mlx
from pixelkit.errors import ErrorCode, MlxError
from pixelkit.textures import Texture, draw_texture, texture_area_to_image, texture_to_image

GRID = [
    [0x11111111, 0x22222222, 0x33333333, 0x44444444],
    [0x55555555, 0x66666666, 0x77777777, 0x88888888],
    [0x99999999, 0xAAAAAAAA, 0xBBBBBBBB, 0xCCCCCCCC],
]


def _texture(colors):
    return Texture(
        len(colors[0]),
        len(colors),
        b"".join(pack_pixel(color) for row in colors for color in row),
    )


@pytest.fixture
def mlx():
    return Mlx(16, 16, "test")


def test_texture_default_pixels_are_blank():
    texture = Texture(2, 3)
    assert texture.pixels == bytearray(2 * 3 * texture.bytes_per_pixel)


def test_texture_rejects_wrong_buffer_length():
    with pytest.raises(ValueError):
        Texture(2, 2, b"\x00" * 3)


def test_texture_to_image_copies_every_pixel(mlx):
    texture = _texture(GRID)
    image = texture_to_image(mlx, texture)
    assert (image.width, image.height) == (texture.width, texture.height)
    assert image.pixels == texture.pixels


def test_texture_to_image_registers_image(mlx):
    image = texture_to_image(mlx, _texture(GRID))
    assert any(owned is image for owned in mlx.images)


@pytest.mark.parametrize("dx, dy", [(0, 0), (1, 0), (0, 1), (1, 1)])
def test_area_copies_region(mlx, dx, dy):
    image = texture_area_to_image(mlx, _texture(GRID), (1, 1), (2, 2))
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(dx, dy) == GRID[1 + dy][1 + dx]


def test_area_too_large(mlx):
    with pytest.raises(MlxError) as info:
        texture_area_to_image(mlx, _texture(GRID), (0, 0), (5, 1))
    assert info.value.code == ErrorCode.INVDIM


def test_area_position_outside(mlx):
    with pytest.raises(MlxError) as info:
        texture_area_to_image(mlx, _texture(GRID), (5, 0), (1, 1))
    assert info.value.code == ErrorCode.INVPOS


def test_area_region_past_edge(mlx):
    with pytest.raises(MlxError) as info:
        texture_area_to_image(mlx, _texture(GRID), (3, 0), (2, 1))
    assert info.value.code == ErrorCode.INVPOS


def test_area_empty_fails_as_memory_error(mlx):
    with pytest.raises(MlxError) as info:
        texture_area_to_image(mlx, _texture(GRID), (0, 0), (0, 1))
    assert info.value.code == ErrorCode.MEMFAIL


def test_texture_to_image_of_empty_texture(mlx):
    with pytest.raises(MlxError) as info:
        texture_to_image(mlx, Texture(0, 0))
    assert info.value.code == ErrorCode.MEMFAIL


def test_draw_texture_places_pixels(mlx):
    image = mlx.new_image(4, 4)
    small = [[GRID[0][0], GRID[0][1]], [GRID[1][0], GRID[1][1]]]
    draw_texture(image, _texture(small), 1, 2)
    assert image.get_pixel(1, 2) == small[0][0]
    assert image.get_pixel(2, 2) == small[0][1]
    assert image.get_pixel(1, 3) == small[1][0]
    assert image.get_pixel(2, 3) == small[1][1]


def test_draw_texture_leaves_other_pixels(mlx):
    image = mlx.new_image(4, 4)
    draw_texture(image, _texture([[GRID[0][0]]]), 3, 3)
    untouched = [
        image.get_pixel(x, y) for y in range(4) for x in range(4) if (x, y) != (3, 3)
    ]
    assert set(untouched) == {0}
    assert image.get_pixel(3, 3) == GRID[0][0]


def test_draw_texture_too_large(mlx):
    image = mlx.new_image(2, 2)
    with pytest.raises(MlxError) as info:
        draw_texture(image, _texture(GRID), 0, 0)
    assert info.value.code == ErrorCode.INVDIM


def test_draw_texture_position_outside(mlx):
    image = mlx.new_image(4, 4)
    with pytest.raises(MlxError) as info:
        draw_texture(image, _texture([[GRID[0][0]]]), 5, 0)
    assert info.value.code == ErrorCode.INVPOS


def test_draw_texture_overflowing_edge(mlx):
    image = mlx.new_image(4, 4)
    small = [[GRID[0][0], GRID[0][1]], [GRID[1][0], GRID[1][1]]]
    with pytest.raises(MlxError) as info:
        draw_texture(image, _texture(small), 3, 0)
    assert info.value.code == ErrorCode.INVPOS