# voronoi_map/core_types.py
from __future__ import annotations

"""
Core type aliases, the Point value object, and lightweight helpers.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

# Basic aliases

RGBTuple = Tuple[int, int, int]

U8Image = NDArray[np.uint8]  # (H, W, 3)
IndexRaster = NDArray[np.int32]  # (H, W) seed indices
Field = NDArray[np.float64]  # (H, W) distances from one seed

Band = Tuple[int, int]  # [y_start, y_end)

# Value objects


@dataclass(frozen=True)
class Point:
    """Integer pixel coordinate. Used for seeds and for query pixels."""

    x: int
    y: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


Seeds = Sequence[Point]

# Small helpers


def hex_to_rgb(hex_str: str) -> RGBTuple:
    """Parse '#rgb' or '#rrggbb' (case-insensitive) into an RGB tuple."""
    s = hex_str.strip().lower()
    if not s.startswith("#"):
        raise ValueError("hex must start with '#'")
    if len(s) == 4:
        r, g, b = s[1], s[2], s[3]
        s = f"#{r}{r}{g}{g}{b}{b}"
    if len(s) != 7:
        raise ValueError("hex must be '#rrggbb' or '#rgb'")
    return (int(s[1:3], 16), int(s[3:5], 16), int(s[5:7], 16))


def points_to_array(seeds: Seeds) -> NDArray[np.int64]:
    """Seed sequence as an (N,2) int64 array of (x, y) rows."""
    out = np.empty((len(seeds), 2), dtype=np.int64)
    for i, p in enumerate(seeds):
        out[i, 0] = p.x
        out[i, 1] = p.y
    return out


def coerce_points(values: Sequence[Sequence[int]]) -> List[Point]:
    """Build Points from (x, y) pairs; Points pass through unchanged."""
    out: List[Point] = []
    for v in values:
        if isinstance(v, Point):
            out.append(v)
            continue
        if len(v) != 2:
            raise ValueError(f"expected (x, y) pair, got {v!r}")
        out.append(Point(int(v[0]), int(v[1])))
    return out


__all__ = [
    # aliases / types
    "RGBTuple",
    "U8Image",
    "IndexRaster",
    "Field",
    "Band",
    "Seeds",
    # value objects
    "Point",
    # helpers
    "hex_to_rgb",
    "points_to_array",
    "coerce_points",
]
