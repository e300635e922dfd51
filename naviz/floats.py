"""Conversion of exact rational values to floats."""

from __future__ import annotations

import math
from numbers import Real


def to_float(value: Real) -> float:
    """Convert a real number (typically a ``Fraction``) to a float.

    Values too large to be represented become signed infinity.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"cannot convert {type(value).__name__} to float")
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf