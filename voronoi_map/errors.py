# voronoi_map/errors.py
from __future__ import annotations

"""
Exception types raised while building metrics.

Both are deterministic functions of the input (seed distribution, parameter
value), so callers should report them rather than retry.
"""


class VoronoiError(Exception):
    """Base class for voronoi_map errors."""


class DegenerateDistribution(VoronoiError, ArithmeticError):
    """Seed covariance matrix is not invertible; Mahalanobis is undefined."""


class UndefinedParameter(VoronoiError, ValueError):
    """Metric kind or parameter has no defined distance (e.g. Minkowski p <= 0)."""


__all__ = ["VoronoiError", "DegenerateDistribution", "UndefinedParameter"]
