# pixelkit

A small, headless toolkit for RGBA pixel images in pure Python, with no
third-party dependencies.

## What is in it

- `pixelkit.image`: `Image`, a width by height buffer of RGBA pixels (four
  bytes each, in `Image.pixels`), with `put_pixel`, `get_pixel`, `resize`
  (the buffer keeps its leading bytes) and `fill` (sets every byte). Each
  placement of an image is an `Instance` with `x`, `y`, `z` and `enabled`.
  Dimensions must be between 1 and 32767.
- `pixelkit.context`: `Mlx`, a window context that owns images, keeps a render
  queue of draw calls, runs loop hooks every frame and holds window state
  (size, position, size limits, title). Methods include `new_image`,
  `image_to_window`, `delete_image`, `set_instance_depth`, `loop_hook`,
  `loop`, `render`, `close_window`, `should_close`, `close_hook`,
  `resize_hook`, `request_close`, `set_window_size`, `set_window_pos`,
  `get_window_pos`, `set_window_limit`, `set_window_title`,
  `projection_matrix` and `terminate`. `Setting` values (`STRETCH_IMAGE`,
  `FULLSCREEN`, `MAXIMIZED`, `DECORATED`, `HEADLESS`) are passed as a mapping
  in `settings`. `Mlx` is also a context manager that calls `terminate` on exit.
- `pixelkit.renderqueue`: `DrawCall` and `sort_render_queue`, which orders
  draw calls by ascending depth.
- `pixelkit.inputs`: `InputHooks`, which dispatches key, scroll, mouse-button
  and cursor events to registered hooks and tracks which keys and buttons are
  held and where the cursor is. Events are delivered with `send_key`,
  `send_scroll`, `send_mouse` and `send_cursor`; key hooks receive a
  `KeyData`, and actions are `Action.RELEASE`, `PRESS` or `REPEAT`.
- `pixelkit.textures`: `Texture` plus `texture_to_image`,
  `texture_area_to_image` and `draw_texture`.
- `pixelkit.xpm42`: `parse_xpm42` and `load_xpm42` for the XPM42 image
  format, returning an `Xpm` whose `texture` holds the pixels.
- `pixelkit.colors`: `fnv_hash` (64-bit FNV-1a), `rgba_to_mono`,
  `pack_pixel` and `unpack_pixel`.
- `pixelkit.errors`: `ErrorCode`, `MlxError` (carrying a `code`) and
  `strerror`.
- `pixelkit.textops`: `is_space`, `atoi`, `atof`, `itoa`, `split`,
  `strtrim`, `substr`, `strnstr` and `strncmp`.
- `pixelkit.printf`: `format_printf` and `ft_printf` supporting `%c`, `%s`,
  `%%`, `%d`, `%i`, `%u`, `%p`, `%x` and `%X`, plus `to_hex`, `put_number`
  and `put_line`.
- `pixelkit.lines`: `LineReader`, which reads a text or binary stream one line
  at a time through a fixed-size read buffer.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from pixelkit.context import Mlx

mlx = Mlx(64, 64, "demo")
img = mlx.new_image(32, 32)
img.put_pixel(0, 0, 0xFF0000FF)   # opaque red, RGBA
mlx.image_to_window(img, 10, 10)

frames = 0

def tick():
    global frames
    frames += 1
    if frames == 3:
        mlx.close_window()

mlx.loop_hook(tick)
mlx.loop()

calls = mlx.render()              # draw calls of one frame, in depth order
mlx.terminate()
```

`put_pixel` and `get_pixel` raise `IndexError` for coordinates outside the
image. Invalid dimensions and other failures raise `MlxError`, whose `code`
is an `ErrorCode`; `strerror(code)` gives its description.

## XPM42

```python
from pixelkit.context import Mlx
from pixelkit.textures import texture_to_image
from pixelkit.xpm42 import load_xpm42

mlx = Mlx(64, 64, "sprites")
xpm = load_xpm42("sprite.xpm42")
image = texture_to_image(mlx, xpm.texture)
```

A file is:

```
!XPM42
<width> <height> <colour count> <characters per pixel> <c|m>
<key> #RRGGBBAA        (one line per colour)
<row of keys>          (one line per pixel row)
```

Mode `c` keeps colours as written; `m` turns them to grayscale. A path
without `.xpm42` in it raises `MlxError(ErrorCode.INVEXT)`, a file that
cannot be opened `INVFILE`, and malformed content `INVXPM`.

## Text utilities

```python
from pixelkit.textops import atof, split
from pixelkit.printf import format_printf
from pixelkit.lines import LineReader
import io

split("a,,b", ",")                  # ["a", "b"]
atof("-0.5")                        # -0.5
format_printf("%d items, %x", 3, 255)   # "3 items, ff"
list(LineReader(io.StringIO("a\nb")))   # ["a\n", "b"]
```

## What it does not do

pixelkit opens no real window and draws nothing on screen. `Mlx` keeps the
state a window would have and works out which draw calls a frame would make,
but there is no display, no GPU rendering, no PNG loading and no text
drawing. Input events do not come from a keyboard or mouse; they are fed in
through the `send_*` methods of `InputHooks`, which is separate from `Mlx`.