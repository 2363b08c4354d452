# voronoi_map/palette.py
from __future__ import annotations

"""
Cell colours.

Exports:
  default_palette() -> uint8 [P,3]
  random_palette(count, rng=None) -> uint8 [count,3]
  build_palette(count, rng=None) -> uint8 [>=count,3]
    Default colours when there are enough of them, otherwise `count` random ones.
"""

from typing import List, Optional, Tuple, Union

import numpy as np

from .constants import DEFAULT_COLOURS
from .core_types import U8Image, hex_to_rgb

RngLike = Union[None, int, np.random.Generator]


def as_generator(rng: RngLike) -> np.random.Generator:
    """Accept a Generator, an int seed, or None (fresh entropy)."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def default_palette(
    hex_name_pairs: List[Tuple[str, str]] = DEFAULT_COLOURS,
) -> U8Image:
    return np.array([hex_to_rgb(hx) for hx, _ in hex_name_pairs], dtype=np.uint8).reshape(-1, 3)


def random_palette(count: int, rng: RngLike = None) -> U8Image:
    if count < 0:
        raise ValueError(f"colour count must be >= 0, got {count}")
    gen = as_generator(rng)
    return gen.integers(0, 256, size=(count, 3), dtype=np.uint8)


def build_palette(count: int, rng: RngLike = None) -> U8Image:
    """
    Colours for `count` seeds.

    Returns the default list when it has at least `count` entries (the
    extra entries are unused), else `count` random colours.
    """
    base = default_palette()
    if base.shape[0] >= count:
        return base
    return random_palette(count, rng)


__all__ = ["RngLike", "as_generator", "default_palette", "random_palette", "build_palette"]
