"""Keyboard, scroll, mouse-button and cursor hooks with tracked input state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional


class Action(IntEnum):
    """What happened to a key or button."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


@dataclass(frozen=True)
class KeyData:
    """Everything a key hook is told about one key event."""

    key: int
    action: Action
    scancode: int
    mods: int


KeyFunc = Callable[[KeyData], None]
ScrollFunc = Callable[[float, float], None]
MouseFunc = Callable[[int, Action, int], None]
CursorFunc = Callable[[float, float], None]


def _require_callable(func: object) -> None:
    if not callable(func):
        raise TypeError("hook must be callable")


class InputHooks:
    """Dispatches input events to the registered hooks and remembers input state."""

    def __init__(self) -> None:
        self._key_func: Optional[KeyFunc] = None
        self._scroll_func: Optional[ScrollFunc] = None
        self._mouse_func: Optional[MouseFunc] = None
        self._cursor_func: Optional[CursorFunc] = None
        self._keys_down: set[int] = set()
        self._buttons_down: set[int] = set()
        self._cursor = (0.0, 0.0)

    def key_hook(self, func: KeyFunc) -> None:
        """Call ``func`` with a KeyData for every key event."""
        _require_callable(func)
        self._key_func = func

    def scroll_hook(self, func: ScrollFunc) -> None:
        """Call ``func(xoffset, yoffset)`` for every scroll event."""
        _require_callable(func)
        self._scroll_func = func

    def mouse_hook(self, func: MouseFunc) -> None:
        """Call ``func(button, action, mods)`` for every mouse-button event."""
        _require_callable(func)
        self._mouse_func = func

    def cursor_hook(self, func: CursorFunc) -> None:
        """Call ``func(xpos, ypos)`` whenever the cursor moves."""
        _require_callable(func)
        self._cursor_func = func

    @staticmethod
    def _track(pressed: set[int], code: int, action: Action) -> None:
        if action == Action.RELEASE:
            pressed.discard(code)
        else:
            pressed.add(code)

    def send_key(self, key: int, action: int, scancode: int = 0, mods: int = 0) -> None:
        """Deliver a key event."""
        act = Action(action)
        self._track(self._keys_down, key, act)
        if self._key_func is not None:
            self._key_func(KeyData(key, act, scancode, mods))

    def send_scroll(self, xoffset: float, yoffset: float) -> None:
        """Deliver a scroll event."""
        if self._scroll_func is not None:
            self._scroll_func(xoffset, yoffset)

    def send_mouse(self, button: int, action: int, mods: int = 0) -> None:
        """Deliver a mouse-button event."""
        act = Action(action)
        self._track(self._buttons_down, button, act)
        if self._mouse_func is not None:
            self._mouse_func(button, act, mods)

    def send_cursor(self, xpos: float, ypos: float) -> None:
        """Deliver a cursor movement."""
        self._cursor = (float(xpos), float(ypos))
        if self._cursor_func is not None:
            self._cursor_func(xpos, ypos)

    def is_key_down(self, key: int) -> bool:
        """Return True while ``key`` is held."""
        return key in self._keys_down

    def is_mouse_down(self, button: int) -> bool:
        """Return True while mouse ``button`` is held."""
        return button in self._buttons_down

    def set_mouse_pos(self, x: int, y: int) -> None:
        """Move the cursor without notifying the cursor hook."""
        self._cursor = (float(x), float(y))

    def get_mouse_pos(self) -> tuple[int, int]:
        """Return the cursor position, truncated to whole pixels."""
        x, y = self._cursor
        return int(x), int(y)