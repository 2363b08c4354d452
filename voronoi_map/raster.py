# voronoi_map/raster.py
from __future__ import annotations

"""
Band-parallel Voronoi rasterizer.

Exports:
  default_workers() -> int
  plan_bands(height, workers) -> list[(y_start, y_end)]
  rasterize(width, height, seeds, metric, *, palette=None, workers=None, debug=False)
    -> IndexRaster [H,W] int32, or U8Image [H,W,3] when a palette is given
  colourize(indices, palette) -> U8Image

Notes:
  - Rows are split into contiguous bands of height // workers rows; the last
    band is clamped to the image, so uneven division only shrinks it.
  - One ThreadPoolExecutor task per band. Each task writes only its own rows,
    so the shared buffer needs no locking. All tasks are joined before the
    buffer is returned.
  - Every pixel depends only on its coordinates, the seeds and the metric, so
    the result is identical for any worker count.
"""

import os
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

import numpy as np

from .classify import classify_band
from .core_types import Band, IndexRaster, Seeds, U8Image
from .metrics import Metric
from .utils import debug_log, format_seconds_compact, key_value_pairs_to_string


def default_workers() -> int:
    """Available CPU count, at least 1."""
    return max(1, os.cpu_count() or 1)


def plan_bands(height: int, workers: int) -> List[Band]:
    """Partition rows [0, height) into contiguous [start, end) bands."""
    if height <= 0:
        return []
    workers = max(1, int(workers))
    chunk = max(1, height // workers)
    return [(start, min(start + chunk, height)) for start in range(0, height, chunk)]


def colourize(indices: IndexRaster, palette: U8Image) -> U8Image:
    """Resolve seed indices to palette colours."""
    return np.asarray(palette, dtype=np.uint8)[indices]


def _check_palette(palette: np.ndarray, n_seeds: int) -> U8Image:
    pal = np.asarray(palette)
    if pal.ndim != 2 or pal.shape[1] != 3:
        raise ValueError(f"palette must be (P,3), got shape {pal.shape}")
    if pal.shape[0] < n_seeds:
        raise ValueError(
            f"palette has {pal.shape[0]} colours for {n_seeds} seeds"
        )
    return pal.astype(np.uint8, copy=False)


def rasterize(
    width: int,
    height: int,
    seeds: Seeds,
    metric: Metric,
    *,
    palette: Optional[np.ndarray] = None,
    workers: Optional[int] = None,
    debug: bool = False,
) -> np.ndarray:
    """
    Assign every pixel of a width x height grid to its nearest seed.

    Args:
      width, height : raster size in pixels (>= 0)
      seeds         : ordered seed points; order sets tie-break and colour index
      metric        : distance used for the comparison
      palette       : optional uint8 [P,3], P >= len(seeds); resolves indices to colours
      workers       : band count hint; defaults to default_workers()
      debug         : print the band plan and timing

    Returns:
      int32 [H,W] seed indices, or uint8 [H,W,3] colours when palette is given.
    """
    if width < 0 or height < 0:
        raise ValueError(f"raster size must be non-negative, got {width}x{height}")
    if len(seeds) == 0:
        raise ValueError("at least one seed is required")
    pal = _check_palette(palette, len(seeds)) if palette is not None else None

    n_workers = default_workers() if workers is None else max(1, int(workers))
    bands = plan_bands(height, n_workers)

    if pal is None:
        out = np.zeros((height, width), dtype=np.int32)
    else:
        out = np.zeros((height, width, 3), dtype=np.uint8)

    if debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Metric", metric.name),
                    ("Size", f"{width}x{height}"),
                    ("Seeds", len(seeds)),
                    ("Workers", n_workers),
                    ("Bands", len(bands)),
                ]
            )
        )

    def run_one(band: Band) -> Band:
        start, end = band
        idx = classify_band(start, end, width, seeds, metric)
        if pal is None:
            out[start:end] = idx
        else:
            out[start:end] = pal[idx]
        return band

    t0 = time.perf_counter()
    if bands:
        with ThreadPoolExecutor(max_workers=min(n_workers, len(bands))) as ex:
            futures = [ex.submit(run_one, band) for band in bands]
            for fu in futures:
                fu.result()
    if debug:
        debug_log(f"rasterized {metric.name} in {format_seconds_compact(time.perf_counter() - t0)}")
    return out


__all__ = ["default_workers", "plan_bands", "colourize", "rasterize"]
