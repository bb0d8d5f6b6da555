"""Headless RGBA images, render queues, input hooks, XPM42 loading and text utilities."""

__version__ = "0.1.0"

__all__ = [
    "colors",
    "context",
    "errors",
    "image",
    "inputs",
    "lines",
    "printf",
    "renderqueue",
    "textops",
    "textures",
    "xpm42",
]