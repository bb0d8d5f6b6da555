"""Error codes and their descriptions."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Kinds of failure the graphics layer reports."""

    SUCCESS = 0
    INVEXT = 1
    INVFILE = 2
    INVPNG = 3
    INVXPM = 4
    INVPOS = 5
    INVDIM = 6
    INVIMG = 7
    VERTFAIL = 8
    FRAGFAIL = 9
    SHDRFAIL = 10
    MEMFAIL = 11
    GLADFAIL = 12
    GLFWFAIL = 13
    WINFAIL = 14
    STRTOBIG = 15


_MESSAGES = {
    ErrorCode.SUCCESS: "No Errors",
    ErrorCode.INVEXT: "File has invalid extension",
    ErrorCode.INVFILE: "Failed to open the file",
    ErrorCode.INVPNG: "PNG file is invalid or corrupted",
    ErrorCode.INVXPM: "XPM42 file is invalid or corrupted",
    ErrorCode.INVPOS: "The specified X or Y positions are out of bounds",
    ErrorCode.INVDIM: "The specified Width or Height dimensions are out of bounds",
    ErrorCode.INVIMG: "The provided image is invalid, might indicate mismanagement of images",
    ErrorCode.VERTFAIL: "Failed to compile the vertex shader.",
    ErrorCode.FRAGFAIL: "Failed to compile the fragment shader.",
    ErrorCode.SHDRFAIL: "Failed to compile the shaders.",
    ErrorCode.MEMFAIL: "Failed to allocate memory",
    ErrorCode.GLADFAIL: "Failed to initialize GLAD",
    ErrorCode.GLFWFAIL: "Failed to initialize GLFW",
    ErrorCode.WINFAIL: "Failed to create window",
    ErrorCode.STRTOBIG: "String is to big to be drawn",
}


def strerror(code: int) -> str:
    """Return the description of an error code; raise ValueError for unknown codes."""
    return _MESSAGES[ErrorCode(code)]


class MlxError(Exception):
    """Raised when a graphics operation fails; ``code`` says why."""

    def __init__(self, code: ErrorCode) -> None:
        self.code = ErrorCode(code)
        super().__init__(f"MLX42: {strerror(self.code)}")