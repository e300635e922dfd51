"""Layout of a fixed-aspect content area with fixed-size side strips."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def translate(self, dx: float, dy: float) -> Rect:
        return Rect(self.x + dx, self.y + dy, self.width, self.height)


@dataclass(frozen=True)
class PanelLayout:
    """The rectangles of an :class:`AspectPanel`: content and the four side strips."""

    content: Rect
    top: Rect
    right: Rect
    bottom: Rect
    left: Rect


@dataclass(frozen=True)
class AspectPanel:
    """Takes as much of ``space`` as possible while keeping the content's aspect ratio.

    ``top``, ``bottom``, ``left`` and ``right`` are the fixed sizes of strips
    placed next to the content.
    """

    space: Rect
    aspect_ratio: float
    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0

    def layout(self) -> PanelLayout:
        max_width = self.space.width
        max_height = self.space.height
        content_width, content_height = constrain_to_aspect(
            max_width - self.left - self.right,
            max_height - self.top - self.bottom,
            self.aspect_ratio,
        )
        padding_x = max_width - (content_width + self.left + self.right)
        padding_y = max_height - (content_height + self.top + self.bottom)
        content_x = padding_x / 2.0 + self.left
        content_y = padding_y / 2.0 + self.top

        rects = PanelLayout(
            content=Rect(content_x, content_y, content_width, content_height),
            top=Rect(content_x, padding_y, content_width, self.top),
            right=Rect(content_x + content_width, content_y, self.right, content_height),
            bottom=Rect(content_x, content_y + content_height, content_width, self.bottom),
            left=Rect(padding_x, content_y, self.left, content_height),
        )
        dx, dy = self.space.x, self.space.y
        return PanelLayout(
            content=rects.content.translate(dx, dy),
            top=rects.top.translate(dx, dy),
            right=rects.right.translate(dx, dy),
            bottom=rects.bottom.translate(dx, dy),
            left=rects.left.translate(dx, dy),
        )


def constrain_to_aspect(width: float, height: float, aspect: float) -> tuple[float, float]:
    """Shrink one dimension of ``(width, height)`` so that ``width / height == aspect``.

    An infinite dimension is derived from the finite one; if both are
    infinite the size is returned unchanged.
    """
    finite_w, finite_h = math.isfinite(width), math.isfinite(height)
    if finite_w and finite_h:
        if width / aspect < height:
            height = width / aspect
        if height * aspect < width:
            width = height * aspect
    elif finite_h:
        width = height * aspect
    elif finite_w:
        height = width / aspect
    return width, height