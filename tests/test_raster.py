"""
Tests for the band planner and the band-parallel rasterizer.
"""

import numpy as np
import pytest

from voronoi_map import Point, build_metric, classify, plan_bands, rasterize
from voronoi_map.metrics import EUCLIDEAN, MANHATTAN, MAXIMUM, MinkowskiMetric
from voronoi_map.raster import colourize, default_workers


def _check_partition(bands, height):
    covered = []
    for start, end in bands:
        assert start < end
        covered.extend(range(start, end))
    assert covered == list(range(height))


@pytest.mark.parametrize(
    "height,workers",
    [(1, 1), (10, 3), (10, 4), (1025, 8), (7, 7), (5, 12), (100, 1), (64, 16)],
)
def test_plan_bands_partitions_rows(height, workers):
    bands = plan_bands(height, workers)
    _check_partition(bands, height)


def test_plan_bands_shape():
    # chunk = 10 // 4 = 2 -> five bands
    assert plan_bands(10, 4) == [(0, 2), (2, 4), (4, 6), (6, 8), (8, 10)]
    # chunk = 10 // 3 = 3 -> last band shrunk to one row
    assert plan_bands(10, 3) == [(0, 3), (3, 6), (6, 9), (9, 10)]
    assert plan_bands(5, 12) == [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5)]
    assert plan_bands(0, 4) == []
    assert plan_bands(6, 0) == [(0, 6)]


def test_default_workers_positive():
    assert default_workers() >= 1


def test_manhattan_scenario():
    seeds = [Point(0, 0), Point(3, 0)]
    out = rasterize(4, 1, seeds, MANHATTAN, workers=1)
    assert out.dtype == np.int32
    assert out.tolist() == [[0, 0, 1, 1]]


def test_maximum_scenario():
    seeds = [Point(0, 0), Point(3, 0)]
    assert rasterize(4, 1, seeds, MAXIMUM, workers=4).tolist() == [[0, 0, 1, 1]]


def test_duplicate_seed_scenario(all_metrics):
    seeds = [Point(0, 0), Point(0, 0)]
    for name, metric in all_metrics.items():
        out = rasterize(6, 5, seeds, metric, workers=3)
        assert not out.any(), name


def test_worker_count_does_not_change_result(scattered_seeds, all_metrics):
    for name, metric in all_metrics.items():
        reference = rasterize(40, 30, scattered_seeds, metric, workers=1)
        for workers in (2, 3, 7, 30, 64):
            out = rasterize(40, 30, scattered_seeds, metric, workers=workers)
            assert out.tobytes() == reference.tobytes(), (name, workers)


def test_every_pixel_written(scattered_seeds):
    out = rasterize(40, 30, scattered_seeds, EUCLIDEAN, workers=4)
    assert out.shape == (30, 40)
    assert out.min() >= 0
    assert out.max() < len(scattered_seeds)
    # each seed owns its own pixel under squared Euclidean unless duplicated earlier
    for s in scattered_seeds:
        assert out[s.y, s.x] == scattered_seeds.index(s)


def test_raster_agrees_with_classify(scattered_seeds):
    out = rasterize(40, 30, scattered_seeds, MANHATTAN, workers=5)
    for y in range(0, 30, 3):
        for x in range(0, 40, 3):
            assert out[y, x] == classify(Point(x, y), scattered_seeds, MANHATTAN)


def test_palette_output(scattered_seeds):
    palette = np.arange(len(scattered_seeds) * 3, dtype=np.uint8).reshape(-1, 3)
    indices = rasterize(40, 30, scattered_seeds, EUCLIDEAN, workers=2)
    rgb = rasterize(40, 30, scattered_seeds, EUCLIDEAN, palette=palette, workers=3)
    assert rgb.shape == (30, 40, 3)
    assert rgb.dtype == np.uint8
    np.testing.assert_array_equal(rgb, colourize(indices, palette))


def test_palette_too_small(scattered_seeds):
    palette = np.zeros((len(scattered_seeds) - 1, 3), dtype=np.uint8)
    with pytest.raises(ValueError):
        rasterize(4, 4, scattered_seeds, EUCLIDEAN, palette=palette)
    with pytest.raises(ValueError):
        rasterize(4, 4, scattered_seeds, EUCLIDEAN, palette=np.zeros((20, 4), dtype=np.uint8))


def test_invalid_arguments():
    with pytest.raises(ValueError):
        rasterize(4, 4, [], EUCLIDEAN)
    with pytest.raises(ValueError):
        rasterize(-1, 4, [Point(0, 0)], EUCLIDEAN)


def test_empty_raster():
    assert rasterize(0, 0, [Point(0, 0)], EUCLIDEAN).shape == (0, 0)
    assert rasterize(5, 0, [Point(0, 0)], EUCLIDEAN).shape == (0, 5)
    assert rasterize(0, 3, [Point(0, 0)], EUCLIDEAN, workers=2).shape == (3, 0)


def test_minkowski_p1_matches_manhattan(scattered_seeds):
    a = rasterize(40, 30, scattered_seeds, MinkowskiMetric(1.0), workers=3)
    b = rasterize(40, 30, scattered_seeds, MANHATTAN, workers=3)
    np.testing.assert_array_equal(a, b)


def test_debug_logs_band_plan(capsys):
    rasterize(8, 8, [Point(1, 1), Point(6, 6)], build_metric("canberra"), workers=4, debug=True)
    out = capsys.readouterr().out
    assert "[debug]" in out
    assert "Bands: 4" in out
    assert "canberra" in out
