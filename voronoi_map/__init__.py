"""
voronoi_map package.

Purpose:
  Rasterize Voronoi cells of a fixed seed set under interchangeable distance
  metrics. See voronoi_map.cli for the command-line run.

Public API:
  Point          : immutable integer coordinate (seeds and pixels).
  metrics        : Metric variants, build_metric, parse_metric.
  classify       : nearest-seed index for one pixel, first seed wins ties.
  rasterize      : band-parallel nearest-seed raster (indices or colours).
  plan_bands     : row partition used by rasterize.
  errors         : DegenerateDistribution, UndefinedParameter.
  seeds, palette : random seed points and cell colours.
  image_io       : seed markers and PNG output.

Quick start:
  from voronoi_map import Point, build_metric, rasterize
  seeds = [Point(0, 0), Point(3, 0)]
  cells = rasterize(4, 1, seeds, build_metric("manhattan"))
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import core_types
from . import errors
from . import metrics
from . import palette
from . import seeds
from . import image_io
from . import utils

from .core_types import Point
from .errors import DegenerateDistribution, UndefinedParameter, VoronoiError
from .metrics import Metric, build_metric, parse_metric
from .classify import classify, classify_band
from .raster import colourize, plan_bands, rasterize

__all__ = [
    "__version__",
    "core_types",
    "errors",
    "metrics",
    "palette",
    "seeds",
    "image_io",
    "utils",
    "Point",
    "VoronoiError",
    "DegenerateDistribution",
    "UndefinedParameter",
    "Metric",
    "build_metric",
    "parse_metric",
    "classify",
    "classify_band",
    "colourize",
    "plan_bands",
    "rasterize",
]
