# voronoi_map/metrics.py
from __future__ import annotations

"""
Distance functions used for nearest-seed comparison.

Exports:
  Metric               : abstract base, distance(a, b) and distance_field(seed, xs, ys)
  EuclideanMetric, ManhattanMetric, MaximumMetric, MinkowskiMetric,
  MinimumMetric, MahalanobisMetric, HammingMetric, CanberraMetric
  EUCLIDEAN, MANHATTAN, MAXIMUM, HAMMING, CANBERRA : stateless singletons
  METRIC_KINDS, DEFAULT_METRICS
  build_metric(kind, params=None, seeds=()) -> Metric
  parse_metric(text, seeds=()) -> Metric

Notes:
  - Not every variant is a metric in the mathematical sense. Minimum inverts
    proximity and Euclidean returns the squared distance; both are only
    meant for argmin comparison.
  - distance_field(seed, xs, ys) must agree with distance(seed, Point(x, y))
    for every pixel of the broadcast (ys, xs) grid. The band kernel relies on it.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

import numpy as np

from .core_types import Field, Point, Seeds, points_to_array
from .errors import DegenerateDistribution, UndefinedParameter


def _offsets(seed: Point, xs: np.ndarray, ys: np.ndarray) -> Tuple[Field, Field]:
    """(seed - pixel) per axis as float64, broadcast over the grid."""
    dx = (np.int64(seed.x) - xs).astype(np.float64)
    dy = (np.int64(seed.y) - ys).astype(np.float64)
    return np.broadcast_arrays(dx, dy)  # type: ignore[return-value]


class Metric(ABC):
    """Distance capability with a stable display name."""

    name: str = "metric"

    @abstractmethod
    def distance(self, point1: Point, point2: Point) -> float:
        ...

    @abstractmethod
    def distance_field(self, seed: Point, xs: np.ndarray, ys: np.ndarray) -> Field:
        ...

    def __str__(self) -> str:
        return self.name


# Stateless variants


class EuclideanMetric(Metric):
    """
    Squared Euclidean distance.

    The square root is monotonic, so skipping it leaves every nearest-seed
    decision unchanged.
    """

    name = "euclidean"

    def distance(self, point1: Point, point2: Point) -> float:
        dx = float(point1.x - point2.x)
        dy = float(point1.y - point2.y)
        return dx * dx + dy * dy

    def distance_field(self, seed: Point, xs: np.ndarray, ys: np.ndarray) -> Field:
        dx, dy = _offsets(seed, xs, ys)
        return dx * dx + dy * dy


class ManhattanMetric(Metric):
    name = "manhattan"

    def distance(self, point1: Point, point2: Point) -> float:
        return float(abs(point1.x - point2.x) + abs(point1.y - point2.y))

    def distance_field(self, seed: Point, xs: np.ndarray, ys: np.ndarray) -> Field:
        dx, dy = _offsets(seed, xs, ys)
        return np.abs(dx) + np.abs(dy)


class MaximumMetric(Metric):
    """Chebyshev distance: the larger of the absolute axis differences."""

    name = "maximum"

    def distance(self, point1: Point, point2: Point) -> float:
        return float(max(abs(point1.x - point2.x), abs(point1.y - point2.y)))

    def distance_field(self, seed: Point, xs: np.ndarray, ys: np.ndarray) -> Field:
        dx, dy = _offsets(seed, xs, ys)
        return np.maximum(np.abs(dx), np.abs(dy))


class HammingMetric(Metric):
    """Number of axes (0, 1 or 2) on which the points differ."""

    name = "hamming"

    def distance(self, point1: Point, point2: Point) -> float:
        return float(int(point1.x != point2.x) + int(point1.y != point2.y))

    def distance_field(self, seed: Point, xs: np.ndarray, ys: np.ndarray) -> Field:
        dx, dy = _offsets(seed, xs, ys)
        return (dx != 0).astype(np.float64) + (dy != 0).astype(np.float64)


class CanberraMetric(Metric):
    """Sum over axes of |a - b| / (|a| + |b|); an axis with a zero denominator adds 0."""

    name = "canberra"

    @staticmethod
    def _term(a: int, b: int) -> float:
        den = float(abs(a) + abs(b))
        if den == 0.0:
            return 0.0
        return float(abs(a - b)) / den

    @staticmethod
    def _term_field(a: int, b: np.ndarray) -> Field:
        num = np.abs(np.int64(a) - b).astype(np.float64)
        den = (abs(int(a)) + np.abs(b)).astype(np.float64)
        out = np.zeros(np.broadcast(num, den).shape, dtype=np.float64)
        np.divide(num, den, out=out, where=den != 0.0)
        return out

    def distance(self, point1: Point, point2: Point) -> float:
        return self._term(point1.x, point2.x) + self._term(point1.y, point2.y)

    def distance_field(self, seed: Point, xs: np.ndarray, ys: np.ndarray) -> Field:
        tx = self._term_field(seed.x, xs)
        ty = self._term_field(seed.y, ys)
        return tx + ty


# Parameterised / stateful variants


@dataclass(frozen=True)
class MinkowskiMetric(Metric):
    """
    Lp norm (|dx|^p + |dy|^p)^(1/p).

    p=1 is Manhattan and p=2 true Euclidean. p <= 0 has no defined distance
    and is rejected at construction.
    """

    p: float

    def __post_init__(self) -> None:
        p = float(self.p)
        if not math.isfinite(p) or p <= 0.0:
            raise UndefinedParameter(
                f"minkowski exponent must be a finite value > 0, got {self.p!r}"
            )
        object.__setattr__(self, "p", p)

    @property
    def name(self) -> str:  # type: ignore[override]
        return f"minkowski({self.p})"

    # Large or tiny p can overflow the plain sum of powers. Those pairs are
    # recomputed as hi * (1 + (lo/hi)^p)^(1/p); if that overflows too the
    # distance is inf.

    def _scaled(self, hi: float, lo: float) -> float:
        if hi == 0.0:
            return 0.0
        try:
            return hi * (1.0 + (lo / hi) ** self.p) ** (1.0 / self.p)
        except OverflowError:
            return math.inf

    def distance(self, point1: Point, point2: Point) -> float:
        ax = float(abs(point1.x - point2.x))
        ay = float(abs(point1.y - point2.y))
        try:
            d = (ax**self.p + ay**self.p) ** (1.0 / self.p)
        except OverflowError:
            d = math.inf
        if math.isfinite(d):
            return d
        return self._scaled(max(ax, ay), min(ax, ay))

    def distance_field(self, seed: Point, xs: np.ndarray, ys: np.ndarray) -> Field:
        dx, dy = _offsets(seed, xs, ys)
        ax, ay = np.abs(dx), np.abs(dy)
        with np.errstate(over="ignore"):
            out = np.power(np.power(ax, self.p) + np.power(ay, self.p), 1.0 / self.p)
            overflow = ~np.isfinite(out)
            if overflow.any():
                hi = np.maximum(ax, ay)[overflow]
                lo = np.minimum(ax, ay)[overflow]
                ratio = np.zeros_like(hi)
                np.divide(lo, hi, out=ratio, where=hi != 0.0)
                scale = np.power(1.0 + np.power(ratio, self.p), 1.0 / self.p)
                out[overflow] = np.where(hi != 0.0, hi * scale, 0.0)
        return out


@dataclass(frozen=True)
class MinimumMetric(Metric):
    """
    Inverted inner metric: 0 when the inner distance is 0, else 1 / inner.

    Nearer points under the inner metric are judged further away, so cells
    come out scattered. Does not satisfy the metric axioms.
    """

    inner: Metric

    @property
    def name(self) -> str:  # type: ignore[override]
        return f"minimum({self.inner.name})"

    def distance(self, point1: Point, point2: Point) -> float:
        d = self.inner.distance(point1, point2)
        if d == 0.0:
            return 0.0
        return 1.0 / d

    def distance_field(self, seed: Point, xs: np.ndarray, ys: np.ndarray) -> Field:
        d = self.inner.distance_field(seed, xs, ys)
        out = np.zeros_like(d, dtype=np.float64)
        np.divide(1.0, d, out=out, where=d != 0.0)
        return out


@dataclass(frozen=True)
class MahalanobisMetric(Metric):
    """
    sqrt(d^T S^-1 d) with S the 2x2 population covariance of the seed set.

    Build with from_seeds(); the inverse is derived once and kept as
    (s00, s01, s10, s11).
    """

    s_inv: Tuple[float, float, float, float]
    name = "mahalanobis"

    @classmethod
    def from_seeds(cls, seeds: Seeds) -> "MahalanobisMetric":
        n = len(seeds)
        if n == 0:
            raise DegenerateDistribution("covariance of an empty seed set is undefined")
        arr = points_to_array(seeds).astype(np.float64)
        xs, ys = arr[:, 0], arr[:, 1]
        x_mean = xs.sum() / n
        y_mean = ys.sum() / n

        sigma_x2 = float(((xs - x_mean) ** 2).sum() / n)
        sigma_y2 = float(((ys - y_mean) ** 2).sum() / n)
        covar_xy = float(((xs - x_mean) * (ys - y_mean)).sum() / n)

        determinant = sigma_x2 * sigma_y2 - covar_xy * covar_xy
        if determinant == 0.0 or not math.isfinite(determinant):
            raise DegenerateDistribution(
                "the seed covariance matrix is not invertible "
                f"(var_x={sigma_x2:g}, var_y={sigma_y2:g}, cov={covar_xy:g})"
            )
        return cls(
            (
                sigma_y2 / determinant,
                -covar_xy / determinant,
                -covar_xy / determinant,
                sigma_x2 / determinant,
            )
        )

    def _quadratic(self, a1, a2):
        s00, s01, s10, s11 = self.s_inv
        b1 = a1 * s00 + a2 * s01
        b2 = a1 * s10 + a2 * s11
        return b1 * a1 + b2 * a2

    def distance(self, point1: Point, point2: Point) -> float:
        q = self._quadratic(float(point1.x - point2.x), float(point1.y - point2.y))
        # rounding can push a near-zero form just below 0
        return math.sqrt(max(q, 0.0))

    def distance_field(self, seed: Point, xs: np.ndarray, ys: np.ndarray) -> Field:
        dx, dy = _offsets(seed, xs, ys)
        q = self._quadratic(dx, dy)
        return np.sqrt(np.maximum(q, 0.0))


EUCLIDEAN = EuclideanMetric()
MANHATTAN = ManhattanMetric()
MAXIMUM = MaximumMetric()
HAMMING = HammingMetric()
CANBERRA = CanberraMetric()

_STATELESS: Mapping[str, Metric] = {
    "euclidean": EUCLIDEAN,
    "manhattan": MANHATTAN,
    "maximum": MAXIMUM,
    "hamming": HAMMING,
    "canberra": CANBERRA,
}

METRIC_KINDS: Tuple[str, ...] = (
    "euclidean",
    "manhattan",
    "maximum",
    "minkowski",
    "minimum",
    "mahalanobis",
    "hamming",
    "canberra",
)

DEFAULT_METRICS: Tuple[str, ...] = (
    "euclidean",
    "manhattan",
    "maximum",
    "minimum(euclidean)",
    "minkowski(1)",
    "minkowski(2)",
    "minkowski(3)",
    "minkowski(4)",
)


# Construction


def build_metric(
    kind: str,
    params: Optional[Mapping[str, Any]] = None,
    seeds: Seeds = (),
) -> Metric:
    """
    Build a metric by kind name.

    Params:
      minkowski   : {"p": float}
      minimum     : {"inner": Metric | kind name, "inner_params": mapping}; inner defaults to euclidean
      mahalanobis : derived from `seeds`; raises DegenerateDistribution

    Raises UndefinedParameter for unknown kinds or missing/invalid parameters.
    """
    params = params or {}
    key = kind.strip().lower()

    if key in _STATELESS:
        return _STATELESS[key]
    if key == "minkowski":
        if "p" not in params:
            raise UndefinedParameter("minkowski requires parameter 'p'")
        try:
            p = float(params["p"])
        except (TypeError, ValueError) as exc:
            raise UndefinedParameter(f"minkowski 'p' is not a number: {params['p']!r}") from exc
        return MinkowskiMetric(p)
    if key == "minimum":
        inner = params.get("inner", "euclidean")
        if not isinstance(inner, Metric):
            inner = build_metric(str(inner), params.get("inner_params"), seeds)
        return MinimumMetric(inner)
    if key == "mahalanobis":
        return MahalanobisMetric.from_seeds(seeds)

    raise UndefinedParameter(
        f"unknown metric kind {kind!r}; expected one of {', '.join(METRIC_KINDS)}"
    )


def _split_call(text: str) -> Tuple[str, Optional[str]]:
    """'kind(arg)' -> ('kind', 'arg'); 'kind' -> ('kind', None)."""
    s = text.strip()
    if "(" not in s:
        return s, None
    if not s.endswith(")"):
        raise UndefinedParameter(f"malformed metric {text!r}")
    head, _, rest = s.partition("(")
    return head.strip(), rest[:-1].strip()


def parse_metric(text: str, seeds: Seeds = ()) -> Metric:
    """
    Parse CLI metric syntax into a Metric.

    Examples: 'manhattan', 'minkowski(3)', 'minimum(mahalanobis)',
    'minimum(minkowski(1.5))'.
    """
    kind, arg = _split_call(text)
    key = kind.lower()
    if key == "minkowski":
        if not arg:
            raise UndefinedParameter("minkowski needs an exponent, e.g. minkowski(3)")
        return build_metric(key, {"p": arg}, seeds)
    if key == "minimum":
        inner = parse_metric(arg, seeds) if arg else EUCLIDEAN
        return build_metric(key, {"inner": inner}, seeds)
    if arg:
        raise UndefinedParameter(f"metric {kind!r} takes no argument")
    return build_metric(key, None, seeds)


__all__ = [
    "Metric",
    "EuclideanMetric",
    "ManhattanMetric",
    "MaximumMetric",
    "MinkowskiMetric",
    "MinimumMetric",
    "MahalanobisMetric",
    "HammingMetric",
    "CanberraMetric",
    "EUCLIDEAN",
    "MANHATTAN",
    "MAXIMUM",
    "HAMMING",
    "CANBERRA",
    "METRIC_KINDS",
    "DEFAULT_METRICS",
    "build_metric",
    "parse_metric",
]
