"""Shared fixtures for voronoi_map tests."""

import pytest

from voronoi_map import Point
from voronoi_map.metrics import (
    CANBERRA,
    EUCLIDEAN,
    HAMMING,
    MANHATTAN,
    MAXIMUM,
    MahalanobisMetric,
    MinimumMetric,
    MinkowskiMetric,
)
from voronoi_map.seeds import generate_random_seeds


@pytest.fixture
def scattered_seeds():
    return generate_random_seeds(40, 30, 9, rng=1234)


@pytest.fixture
def all_metrics(scattered_seeds):
    """One instance of every variant, keyed by display name."""
    metrics = [
        EUCLIDEAN,
        MANHATTAN,
        MAXIMUM,
        MinkowskiMetric(3.0),
        MinimumMetric(EUCLIDEAN),
        MinimumMetric(MinkowskiMetric(3.0)),
        MahalanobisMetric.from_seeds(scattered_seeds),
        HAMMING,
        CANBERRA,
    ]
    return {m.name: m for m in metrics}


@pytest.fixture
def sample_points():
    return [
        Point(0, 0),
        Point(3, 0),
        Point(-4, 7),
        Point(12, -5),
        Point(5, 5),
        Point(0, 9),
    ]
