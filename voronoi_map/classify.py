# voronoi_map/classify.py
from __future__ import annotations

"""
Nearest-seed classification.

classify(pixel, seeds, metric) -> int
  Index of the seed with the smallest metric.distance(seed, pixel).

classify_band(y_start, y_end, width, seeds, metric) -> IndexRaster
  The same rule for every pixel of rows [y_start, y_end), evaluated one seed
  at a time over a distance field.

Ties keep the earlier index: a later seed only takes over on a strictly
smaller distance. Brute force over all seeds, no pruning.
"""

import numpy as np

from .core_types import IndexRaster, Point, Seeds
from .metrics import Metric


def classify(pixel: Point, seeds: Seeds, metric: Metric) -> int:
    """Index of the nearest seed to `pixel`; first seed wins ties."""
    if len(seeds) == 0:
        raise ValueError("cannot classify against an empty seed set")
    best_idx = 0
    best = metric.distance(seeds[0], pixel)
    for i in range(1, len(seeds)):
        d = metric.distance(seeds[i], pixel)
        if d < best:
            best = d
            best_idx = i
    return best_idx


def classify_band(
    y_start: int, y_end: int, width: int, seeds: Seeds, metric: Metric
) -> IndexRaster:
    """
    Seed indices for rows [y_start, y_end) and columns [0, width).

    Returns:
      int32 [y_end - y_start, width]
    """
    if len(seeds) == 0:
        raise ValueError("cannot classify against an empty seed set")
    rows = max(0, y_end - y_start)
    if rows == 0 or width <= 0:
        return np.zeros((rows, max(0, width)), dtype=np.int32)

    xs = np.arange(width, dtype=np.int64)[None, :]
    ys = np.arange(y_start, y_end, dtype=np.int64)[:, None]

    best = np.array(metric.distance_field(seeds[0], xs, ys), dtype=np.float64)
    best_idx = np.zeros((rows, width), dtype=np.int32)
    for i in range(1, len(seeds)):
        d = metric.distance_field(seeds[i], xs, ys)
        better = d < best
        best[better] = d[better]
        best_idx[better] = i
    return best_idx


__all__ = ["classify", "classify_band"]
