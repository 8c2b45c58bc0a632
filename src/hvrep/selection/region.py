from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ..geometry.scalar import Scalar
from ..geometry.segment import Candidate, Location, Point, Segment, optimal_point


@dataclass
class Region:
    """Contiguous slice of the front with its own lower-left reference.

    Only segments that reach into the reference quadrant are kept in
    ``chain``; ``best`` is the first maximum over them and ``best_index``
    its position in ``chain``.
    """

    chain: list[Segment]
    reference: Point
    scalar: Scalar
    best: Candidate
    best_index: int

    @classmethod
    def build(cls, chain: Sequence[Segment], reference: Point, scalar: Scalar) -> Region | None:
        kept: list[Segment] = []
        best: Candidate | None = None
        best_index = -1
        for segment in chain:
            cand = optimal_point(segment, reference, scalar)
            if cand is None:
                continue
            if best is None or scalar.compare(cand.contribution, best.contribution) > 0:
                best, best_index = cand, len(kept)
            kept.append(segment)
        if best is None:
            return None
        return cls(kept, reference, scalar, best, best_index)

    @property
    def contribution(self) -> Any:
        return self.best.contribution

    def compare(self, other: Region) -> int:
        return self.scalar.compare(self.contribution, other.contribution)

    def split_at_best(self) -> tuple[Region | None, Region | None]:
        """Split the chain around the best point into the parts above and below it.

        The part above keeps the reference x and is bounded below by the
        best point's y; the part below starts at the best point's x.
        """
        above = self.chain[: self.best_index]
        below = self.chain[self.best_index + 1 :]
        straddler = self.chain[self.best_index]
        point = self.best.point

        if self.best.location is Location.START:
            below.insert(0, straddler)
        elif self.best.location is Location.END:
            above.append(straddler)
        else:
            if Segment.is_monotonic(straddler.start, point):
                above.append(Segment(straddler.start, point))
            if Segment.is_monotonic(point, straddler.end):
                below.insert(0, Segment(point, straddler.end))

        rx, ry = self.reference
        px, py = point
        region_above = Region.build(above, (rx, py), self.scalar) if above else None
        region_below = Region.build(below, (px, ry), self.scalar) if below else None
        return region_above, region_below
