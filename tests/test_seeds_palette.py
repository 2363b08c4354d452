"""
Tests for seed generation and cell colours.
"""

import numpy as np
import pytest

from voronoi_map import Point
from voronoi_map.constants import DEFAULT_COLOURS
from voronoi_map import core_types
from voronoi_map.core_types import coerce_points, hex_to_rgb, points_to_array
from voronoi_map.palette import build_palette, default_palette, random_palette
from voronoi_map.seeds import generate_random_seeds


def test_random_seeds_in_bounds():
    seeds = generate_random_seeds(17, 5, 200, rng=7)
    assert len(seeds) == 200
    assert all(isinstance(p, Point) for p in seeds)
    assert all(0 <= p.x < 17 and 0 <= p.y < 5 for p in seeds)


def test_random_seeds_reproducible():
    assert generate_random_seeds(100, 100, 12, rng=3) == generate_random_seeds(100, 100, 12, rng=3)
    gen = np.random.default_rng(3)
    assert generate_random_seeds(100, 100, 12, rng=gen) == generate_random_seeds(100, 100, 12, rng=3)


def test_random_seeds_edge_cases():
    assert generate_random_seeds(0, 0, 0) == []
    with pytest.raises(ValueError):
        generate_random_seeds(10, 10, -1)
    with pytest.raises(ValueError):
        generate_random_seeds(0, 10, 3)


def test_default_palette_used_when_large_enough():
    base = default_palette()
    assert base.shape == (len(DEFAULT_COLOURS), 3)
    assert tuple(base[0]) == (255, 0, 0)
    np.testing.assert_array_equal(build_palette(5), base)
    np.testing.assert_array_equal(build_palette(len(DEFAULT_COLOURS)), base)


def test_random_palette_when_default_too_small():
    n = len(DEFAULT_COLOURS) + 1
    pal = build_palette(n, rng=11)
    assert pal.shape == (n, 3)
    assert pal.dtype == np.uint8
    np.testing.assert_array_equal(pal, random_palette(n, rng=11))
    with pytest.raises(ValueError):
        random_palette(-1)


def test_point_value_semantics():
    assert Point(1, 2) == Point(1, 2)
    assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2
    with pytest.raises(AttributeError):
        Point(1, 2).x = 5  # type: ignore[misc]


def test_point_helpers():
    seeds = coerce_points([(1, 2), Point(3, 4), [5, 6]])
    assert seeds == [Point(1, 2), Point(3, 4), Point(5, 6)]
    assert points_to_array(seeds).tolist() == [[1, 2], [3, 4], [5, 6]]
    with pytest.raises(ValueError):
        coerce_points([(1, 2, 3)])


def test_hex_to_rgb_accepts_short_and_long_forms():
    assert hex_to_rgb("#FFC800") == (255, 200, 0)
    assert hex_to_rgb("#0f0") == (0, 255, 0)
    assert hex_to_rgb(" #FFAFAF ") == (255, 175, 175)
    with pytest.raises(ValueError):
        hex_to_rgb("ffffff")


def test_core_types_exports_resolve():
    missing = [name for name in core_types.__all__ if not hasattr(core_types, name)]
    assert missing == []
    assert "hex_to_rgb" in core_types.__all__
