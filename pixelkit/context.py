"""The window context: images, render queue, loop hooks and window state."""

from __future__ import annotations

import math
import time
from enum import IntEnum
from typing import Callable, Mapping, Optional

from pixelkit.image import Image, Instance
from pixelkit.renderqueue import DrawCall, sort_render_queue

LoopFunc = Callable[[], None]
CloseFunc = Callable[[], None]
ResizeFunc = Callable[[int, int], None]


class Setting(IntEnum):
    """Options that shape how a window is created and drawn."""

    STRETCH_IMAGE = 0
    FULLSCREEN = 1
    MAXIMIZED = 2
    DECORATED = 3
    HEADLESS = 4


_DEFAULT_SETTINGS = {
    Setting.STRETCH_IMAGE: False,
    Setting.FULLSCREEN: False,
    Setting.MAXIMIZED: False,
    Setting.DECORATED: True,
    Setting.HEADLESS: False,
}


def _require_callable(func: object) -> None:
    if not callable(func):
        raise TypeError("hook must be callable")


def _divide(numerator: float, denominator: float) -> float:
    """Divide as floating point hardware does, giving inf or nan for zero."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


class Mlx:
    """A window holding images drawn in depth order and hooks run every frame."""

    def __init__(
        self,
        width: int,
        height: int,
        title: str,
        resizable: bool = False,
        settings: Optional[Mapping[Setting, int]] = None,
    ) -> None:
        if width <= 0:
            raise ValueError("Window width must be positive")
        if height <= 0:
            raise ValueError("Window height must be positive")
        if title is None:
            raise ValueError("Window title can't be null")
        self.settings: dict[Setting, int] = dict(_DEFAULT_SETTINGS)
        for key, value in (settings or {}).items():
            self.settings[Setting(key)] = value
        self.width = width
        self.height = height
        self.initial_width = width
        self.initial_height = height
        self.title = title
        self.resizable = bool(resizable)
        self.delta_time = 0.0
        self.window_pos = (0, 0)
        self.window_limits = (-1, -1, -1, -1)
        self.zdepth = 0
        self._images: list[Image] = []
        self._render_queue: list[DrawCall] = []
        self._hooks: list[LoopFunc] = []
        self._close_func: Optional[CloseFunc] = None
        self._resize_func: Optional[ResizeFunc] = None
        self._should_close = False
        self._sort_queue = False

    def __enter__(self) -> "Mlx":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.terminate()

    @property
    def images(self) -> tuple[Image, ...]:
        """The images created in this window, newest first."""
        return tuple(self._images)

    @property
    def render_queue(self) -> tuple[DrawCall, ...]:
        """The pending draw calls in their current order."""
        return tuple(self._render_queue)

    # Images

    def new_image(self, width: int, height: int) -> Image:
        """Create a blank image owned by this window."""
        image = Image(width, height)
        self._images.insert(0, image)
        return image

    def image_to_window(self, image: Image, x: int, y: int) -> int:
        """Show ``image`` at (x, y) above everything shown so far; return the instance index."""
        image.instances.append(Instance(x, y, self.zdepth, True))
        self.zdepth += 1
        index = len(image.instances) - 1
        self._render_queue.insert(0, DrawCall(image, index))
        self._sort_queue = True
        return index

    def delete_image(self, image: Image) -> None:
        """Remove ``image`` and every draw call that shows it."""
        self._render_queue = [call for call in self._render_queue if call.image is not image]
        for position, owned in enumerate(self._images):
            if owned is image:
                del self._images[position]
                break

    def set_instance_depth(self, instance: Instance, depth: int) -> None:
        """Change the depth of an instance; the queue is re-sorted before the next draw."""
        if instance.z == depth:
            return
        instance.z = depth
        self._sort_queue = True

    # Loop

    def loop_hook(self, func: LoopFunc) -> None:
        """Run ``func`` once every frame, after the hooks added before it."""
        _require_callable(func)
        self._hooks.append(func)

    def _run_hooks(self) -> None:
        for hook in list(self._hooks):
            if self._should_close:
                break
            hook()

    def loop(self) -> None:
        """Run frames until the window is asked to close."""
        old_start = 0.0
        origin = time.perf_counter()
        while not self._should_close:
            start = time.perf_counter() - origin
            self.delta_time = start - old_start
            old_start = start
            self._run_hooks()
            self.render()

    def render(self) -> list[DrawCall]:
        """Return the draw calls of one frame, in drawing order."""
        if self._sort_queue:
            self._sort_queue = False
            self._render_queue = sort_render_queue(self._render_queue)
        return [
            call
            for call in self._render_queue
            if call.image.enabled and call.instance().enabled
        ]

    def projection_matrix(self) -> tuple[float, ...]:
        """Return the 4x4 view projection matrix, column by column."""
        if self.settings[Setting.STRETCH_IMAGE]:
            width, height = self.initial_width, self.initial_height
        else:
            width, height = self.width, self.height
        depth = float(self.zdepth)
        span = depth - -depth
        return (
            2.0 / width, 0.0, 0.0, 0.0,
            0.0, 2.0 / -height, 0.0, 0.0,
            0.0, 0.0, _divide(-2.0, span), 0.0,
            -1.0, 1.0, -_divide(depth + -depth, span), 1.0,
        )

    # Window

    def close_window(self) -> None:
        """Ask the loop to stop after the current frame."""
        self._should_close = True

    def should_close(self) -> bool:
        """Return True once the window has been asked to close."""
        return self._should_close

    def close_hook(self, func: CloseFunc) -> None:
        """Call ``func`` when the user asks to close the window."""
        _require_callable(func)
        self._close_func = func

    def resize_hook(self, func: ResizeFunc) -> None:
        """Call ``func(width, height)`` when the window changes size."""
        _require_callable(func)
        self._resize_func = func

    def request_close(self) -> None:
        """Deliver a close request from the user, as a window manager would."""
        self._should_close = True
        if self._close_func is not None:
            self._close_func()

    def set_window_size(self, width: int, height: int) -> None:
        """Resize the window and notify the resize hook."""
        self.width = width
        self.height = height
        if self._resize_func is not None:
            self._resize_func(width, height)

    def set_window_pos(self, x: int, y: int) -> None:
        """Move the window."""
        self.window_pos = (x, y)

    def get_window_pos(self) -> tuple[int, int]:
        """Return the window position."""
        return self.window_pos

    def set_window_limit(
        self, min_width: int, min_height: int, max_width: int, max_height: int
    ) -> None:
        """Record the size limits of the window; -1 means no limit."""
        self.window_limits = (min_width, min_height, max_width, max_height)

    def set_window_title(self, title: str) -> None:
        """Change the window title."""
        if title is None:
            raise ValueError("Window title can't be null")
        self.title = title

    def terminate(self) -> None:
        """Release every hook, draw call and image."""
        self._hooks.clear()
        self._render_queue.clear()
        self._images.clear()
        self._should_close = True