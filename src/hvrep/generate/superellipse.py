from __future__ import annotations

import numpy as np

from ..geometry.scalar import FLOAT64, Scalar
from ..geometry.segment import Segment


def superellipse_points(n: int, d: float) -> np.ndarray:
    """Sample n + 1 points of |x|^d + |y|^d = 1 in the first quadrant, left to right."""
    if n < 1:
        raise ValueError("number of segments must be at least 1")
    if not d > 0:
        raise ValueError("shape exponent d must be positive")
    theta = np.linspace(0.0, np.pi / 2.0, n + 1)
    xs = np.sin(theta) ** (2.0 / d)
    ys = np.cos(theta) ** (2.0 / d)
    return np.column_stack([xs, ys])


def superellipse_segments(n: int, d: float, scalar: Scalar = FLOAT64) -> list[Segment]:
    """Chain of up to n segments approximating the superellipse with exponent d.

    Samples that coincide with the previous kept one in either coordinate
    (underflow for small d, rounding in low precision) are skipped, so
    extreme shapes yield fewer segments. Raises ValueError when no two
    samples are distinguishable in the scalar type.
    """
    kept: list[tuple] = []
    for x, y in superellipse_points(n, d):
        p = (scalar.cast(x), scalar.cast(y))
        if not kept or Segment.is_monotonic(kept[-1], p):
            kept.append(p)
    if len(kept) < 2:
        raise ValueError(
            f"superellipse with d={d} collapses to a single point in {scalar.name}"
        )
    return [Segment(kept[i], kept[i + 1]) for i in range(len(kept) - 1)]
