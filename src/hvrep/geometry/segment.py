from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple

from ..errors import NonMonotonicSegment
from .scalar import Scalar

Point = tuple[Any, Any]


def is_finite(point: Point) -> bool:
    # NaN compares false; works for numpy scalars and Fraction alike
    return all(abs(c) < math.inf for c in point)


class Location(Enum):
    """Where on a (clipped) segment the optimal point was found."""

    START = "start"
    MIDDLE = "middle"
    END = "end"


class Clipped(NamedTuple):
    """Segment endpoints relative to a reference, trimmed to its quadrant.

    ``x_intercept`` and ``y_intercept`` are where the supporting line
    crosses the reference axes (both positive).
    """

    start: Point
    end: Point
    x_intercept: Any
    y_intercept: Any


class Candidate(NamedTuple):
    point: Point
    contribution: Any
    location: Location


@dataclass(frozen=True)
class Segment:
    """Non-dominated line piece with ``start.x < end.x`` and ``start.y > end.y``.

    Reversed endpoints are swapped on construction; any other ordering
    raises ``NonMonotonicSegment``.
    """

    start: Point
    end: Point

    def __post_init__(self) -> None:
        start, end = tuple(self.start), tuple(self.end)
        if not (is_finite(start) and is_finite(end)):
            raise NonMonotonicSegment(f"segment {start} -> {end} has non-finite coordinates")
        if Segment.is_monotonic(start, end):
            pass
        elif Segment.is_monotonic(end, start):
            start, end = end, start
        else:
            raise NonMonotonicSegment(
                f"segment {start} -> {end} needs to be sorted such that "
                "start.x < end.x and start.y > end.y"
            )
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    @staticmethod
    def is_monotonic(start: Point, end: Point) -> bool:
        return start[0] < end[0] and start[1] > end[1]

    @classmethod
    def from_points(cls, start: Point, end: Point, scalar: Scalar) -> Segment:
        return cls(
            (scalar.cast(start[0]), scalar.cast(start[1])),
            (scalar.cast(end[0]), scalar.cast(end[1])),
        )


def clip(segment: Segment, reference: Point, scalar: Scalar) -> Clipped | None:
    """Trim a segment to the open quadrant up-and-right of ``reference``.

    Returns coordinates relative to the reference, or None when no part of
    the segment lies inside the quadrant. The segment itself is untouched.
    """
    zero = scalar.zero
    rx, ry = reference
    sx, sy = segment.start[0] - rx, segment.start[1] - ry
    ex, ey = segment.end[0] - rx, segment.end[1] - ry

    # entirely left of or below the reference
    if scalar.le(ex, zero) or scalar.le(sy, zero):
        return None

    slope = (ey - sy) / (ex - sx)
    y_intercept = sy - slope * sx
    if scalar.le(y_intercept, zero):
        return None
    x_intercept = -y_intercept / slope

    if sx < zero:
        sx, sy = zero, y_intercept
    if ey < zero:
        ex, ey = x_intercept, zero
    return Clipped((sx, sy), (ex, ey), x_intercept, y_intercept)


def optimal_point(segment: Segment, reference: Point, scalar: Scalar) -> Candidate | None:
    """Point of the segment dominating the largest box with ``reference``.

    On the supporting line the optimum is the midpoint of the hypotenuse of
    the triangle cut off by the reference axes; it is clamped to the
    clipped segment when it falls outside of it.
    """
    clipped = clip(segment, reference, scalar)
    if clipped is None:
        return None

    zero = scalar.zero
    mid = (clipped.x_intercept / scalar.two, clipped.y_intercept / scalar.two)
    if scalar.le(mid[0], clipped.start[0]):
        rel, location = clipped.start, Location.START
    elif scalar.ge(mid[0], clipped.end[0]):
        rel, location = clipped.end, Location.END
    else:
        rel, location = mid, Location.MIDDLE

    contribution = rel[0] * rel[1]
    if scalar.compare(contribution, zero) <= 0 or scalar.approx_eq(contribution, zero):
        return None
    point = (rel[0] + reference[0], rel[1] + reference[1])
    return Candidate(point, contribution, location)
