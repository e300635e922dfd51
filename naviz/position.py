"""Two-dimensional positions."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Iterable

from .floats import to_float


@dataclass(frozen=True)
class Position:
    """A point with an ``x`` and a ``y`` coordinate."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_pair(cls, pair: Iterable[Real]) -> Position:
        """Build a position from an ``(x, y)`` pair of real numbers."""
        x, y = pair
        return cls(to_float(x), to_float(y))

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __mul__(self, factor: float) -> Position:
        if not isinstance(factor, Real):
            return NotImplemented
        return Position(self.x * factor, self.y * factor)

    def __add__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)