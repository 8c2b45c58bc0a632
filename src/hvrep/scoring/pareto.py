from __future__ import annotations

import numpy as np


def hypervolume_2d(points: np.ndarray, ref: tuple[float, float]) -> float:
    """Exact hypervolume in 2D for maximization objectives with reference point.

    Assumes larger is better on both axes; parts of points below or left of
    ``ref`` do not count.
    """
    P = np.asarray(points, dtype=float)
    if P.size == 0:
        return 0.0
    P = P.reshape(-1, 2)
    # sweep right to left so each point only adds the strip above the best y so far
    P = P[np.argsort(-P[:, 0], kind="stable")]
    hv = 0.0
    best_y = ref[1]
    for x, y in P:
        width = max(0.0, x - ref[0])
        height = max(0.0, y - best_y)
        hv += width * height
        best_y = max(best_y, y)
    return float(hv)
