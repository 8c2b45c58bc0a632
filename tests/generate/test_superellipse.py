from __future__ import annotations

import math

import pytest

from hvrep.generate.superellipse import superellipse_points, superellipse_segments
from hvrep.geometry.scalar import FLOAT32
from hvrep.selection.model import Selector


@pytest.mark.parametrize("n", [1, 2, 7, 64, 500])
@pytest.mark.parametrize("d", [0.5, 1.0, 2.0, 3.5, 10.0])
def test_generated_chain_builds_a_selector(n, d):
    segs = superellipse_segments(n, d)
    assert len(segs) == n
    sel = Selector(segs, (0.0, 0.0))
    assert sel.maximum > 0.0
    assert segs[0].start[0] == 0.0 and segs[0].start[1] == 1.0


def test_points_lie_on_curve():
    pts = superellipse_points(10, 3.0)
    assert pts.shape == (11, 2)
    assert ((pts[:, 0] ** 3 + pts[:, 1] ** 3) == pytest.approx(1.0))


def test_line_and_circle_areas():
    assert float(Selector(superellipse_segments(5, 1.0), (0.0, 0.0)).maximum) == pytest.approx(0.5)
    quarter = float(Selector(superellipse_segments(400, 2.0), (0.0, 0.0)).maximum)
    assert quarter == pytest.approx(math.pi / 4, abs=1e-4)


def test_single_precision_chain():
    segs = superellipse_segments(16, 2.0, FLOAT32)
    Selector(segs, (0.0, 0.0), FLOAT32)


@pytest.mark.parametrize("n,d", [(0, 2.0), (-3, 2.0), (4, 0.0), (4, -1.0)])
def test_invalid_arguments(n, d):
    with pytest.raises(ValueError):
        superellipse_segments(n, d)


def test_underflowing_samples_are_skipped():
    segs = superellipse_segments(100_000, 0.01)
    assert 1 <= len(segs) <= 100_000
    Selector(segs, (0.0, 0.0))
    assert len(superellipse_segments(5, 1e-9)) >= 1


def test_indistinguishable_samples_raise():
    with pytest.raises(ValueError, match="collapses"):
        superellipse_segments(8, 1e20)
