"""Draw calls and the ordering of the render queue by depth."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from pixelkit.image import Image, Instance


@dataclass
class DrawCall:
    """A request to draw one instance of an image."""

    image: Image
    instance_id: int

    def instance(self) -> Instance:
        """Return the instance this draw call refers to."""
        return self.image.instances[self.instance_id]


def sort_render_queue(queue: Iterable[DrawCall]) -> list[DrawCall]:
    """Return the draw calls ordered by ascending depth.

    Calls of equal depth come out in the reverse of their original order,
    so a later entry is drawn before an earlier one of the same depth.
    """
    return sorted(reversed(list(queue)), key=lambda call: call.instance().z)