from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from ..errors import EmptyApproximation, InvalidReference, UnsortedSegments, WrongDimensions
from ..geometry.scalar import FLOAT64, Scalar
from ..geometry.segment import Point, Segment, clip, is_finite
from .region import Region


@dataclass(frozen=True)
class Emission:
    point: Point
    contribution: Any
    cumulative: Any
    relative: Any


@dataclass
class _HeapEntry:
    region: Region
    seq: int

    def __lt__(self, other: _HeapEntry) -> bool:
        # heapq pops the smallest entry: larger contribution sorts first,
        # equal contributions come out in insertion order
        order = self.region.compare(other.region)
        if order != 0:
            return order > 0
        return self.seq < other.seq


def validate_chain(chain: Sequence[Segment], scalar: Scalar = FLOAT64) -> None:
    """Raise unless the chain is non-empty and ordered left to right without overlap."""
    if not chain:
        raise EmptyApproximation("at least one segment is required")
    for prev, cur in zip(chain, chain[1:]):
        if not (scalar.ge(cur.start[0], prev.end[0]) and scalar.le(cur.start[1], prev.end[1])):
            raise UnsortedSegments(f"segment {cur.start} -> {cur.end} overlaps its predecessor")


def default_reference(chain: Sequence[Segment]) -> Point:
    """Lower-left corner of the chain's bounding box."""
    return (chain[0].start[0], chain[-1].end[1])


def max_hypervolume(chain: Iterable[Segment], reference: Point, scalar: Scalar = FLOAT64) -> Any:
    """Exact area dominated by the chain relative to ``reference``.

    Per clipped segment: the rectangle between the previous segment's end
    and this start, the rectangle under the segment, and the triangle on
    top of it.
    """
    total = scalar.zero
    left = scalar.zero
    for segment in chain:
        clipped = clip(segment, reference, scalar)
        if clipped is None:
            continue
        (sx, sy), (ex, ey) = clipped.start, clipped.end
        total += (sx - left) * sy
        total += (ex - sx) * ey
        total += (ex - sx) * (sy - ey) / scalar.two
        left = ex
    return total


def _as_segment(item: Segment | Sequence[Point], scalar: Scalar) -> Segment:
    if isinstance(item, Segment):
        return Segment.from_points(item.start, item.end, scalar)
    start, end = item
    return Segment.from_points(start, end, scalar)


class Selector:
    """Emits points of a piecewise-linear front in order of hypervolume contribution.

    Holds a max-heap of regions keyed by their best contribution. Each
    emission pops the best region, reports its point and pushes the (at
    most two) regions left over on either side of that point. Once the
    heap is empty the selector is exhausted and ``emit_next`` keeps
    returning None.
    """

    def __init__(
        self,
        chain: Iterable[Segment | Sequence[Point]],
        reference: Sequence[Any] | None = None,
        scalar: Scalar = FLOAT64,
    ) -> None:
        self.scalar = scalar
        segments = [_as_segment(item, scalar) for item in chain]
        validate_chain(segments, scalar)

        if reference is None:
            reference = default_reference(segments)
        try:
            ref = tuple(reference)
        except TypeError:
            raise WrongDimensions("reference must be a sequence of 2 coordinates") from None
        if len(ref) != 2:
            raise WrongDimensions(f"expected 2 reference coordinates, got {len(ref)}")

        try:
            self.reference: Point = (scalar.cast(ref[0]), scalar.cast(ref[1]))
        except (TypeError, ValueError, ArithmeticError) as e:
            raise InvalidReference(f"cannot read reference {ref} as {scalar.name}: {e}") from e
        if not is_finite(self.reference):
            raise InvalidReference(f"reference {ref} has non-finite coordinates")
        self.segments: tuple[Segment, ...] = tuple(segments)
        self.maximum = max_hypervolume(self.segments, self.reference, scalar)
        self.current = scalar.zero
        self._heap: list[_HeapEntry] = []
        self._counter = itertools.count()
        self._push(Region.build(self.segments, self.reference, scalar))

    def _push(self, region: Region | None) -> None:
        if region is not None:
            heapq.heappush(self._heap, _HeapEntry(region, next(self._counter)))

    @property
    def exhausted(self) -> bool:
        return not self._heap

    def relative(self) -> Any:
        if self.maximum > self.scalar.zero:
            return self.current / self.maximum
        return self.scalar.zero

    def emit_next(self) -> Emission | None:
        if not self._heap:
            return None
        region = heapq.heappop(self._heap).region
        self.current = self.current + region.contribution

        above, below = region.split_at_best()
        self._push(above)
        self._push(below)
        return Emission(region.best.point, region.contribution, self.current, self.relative())

    def solve(self, k: int) -> list[Emission]:
        """Emit up to ``k`` points, fewer if the front is exhausted first."""
        if k < 0:
            raise ValueError("number of points must be non-negative")
        out: list[Emission] = []
        for _ in range(k):
            emission = self.emit_next()
            if emission is None:
                break
            out.append(emission)
        return out
