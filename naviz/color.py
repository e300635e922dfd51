"""RGBA colours with alpha compositing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator


def _saturate(value: float) -> int:
    """Clamp a float into the 0..255 range, truncating towards zero."""
    if math.isnan(value):
        return 0
    if value <= 0:
        return 0
    if value >= 255:
        return 255
    return int(value)


@dataclass(frozen=True)
class Color:
    """A colour made of 8-bit red, green, blue and alpha channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def __post_init__(self) -> None:
        for channel in self:
            if isinstance(channel, bool) or not isinstance(channel, int):
                raise TypeError("colour channels must be integers")
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b, self.a))

    def over(self, base: Color) -> Color:
        """Composite this colour over ``base``."""
        sr, sg, sb, sa = self
        br, bg, bb, ba = base

        alpha = sa + ba * (255 - sa) // 255
        if alpha == 0:
            return Color()

        def mix(source: int, below: int) -> int:
            return ((source * sa + below * ba * (255 - sa) // 255) // alpha) % 256

        return Color(mix(sr, br), mix(sg, bg), mix(sb, bb), alpha % 256)

    def __mul__(self, factor: float) -> Color:
        if not isinstance(factor, Real):
            return NotImplemented
        return Color(*(_saturate(channel * float(factor)) for channel in self))

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(*(min(x + y, 255) for x, y in zip(self, other)))