# voronoi_map/seeds.py
from __future__ import annotations

"""
Seed point generation.
"""

from typing import List

from .core_types import Point
from .palette import RngLike, as_generator


def generate_random_seeds(
    width: int, height: int, count: int, rng: RngLike = None
) -> List[Point]:
    """Uniform random seeds in [0, width) x [0, height). Duplicates are allowed."""
    if count < 0:
        raise ValueError(f"seed count must be >= 0, got {count}")
    if count == 0:
        return []
    if width <= 0 or height <= 0:
        raise ValueError(f"cannot place seeds in a {width}x{height} area")
    gen = as_generator(rng)
    xs = gen.integers(0, width, size=count)
    ys = gen.integers(0, height, size=count)
    return [Point(int(x), int(y)) for x, y in zip(xs.tolist(), ys.tolist())]


__all__ = ["generate_random_seeds"]
