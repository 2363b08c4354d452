#!/usr/bin/env python3
"""
voronoi_map CLI.
Render Voronoi diagrams of one seed set under several distance metrics.

Usage:
  python -m voronoi_map --width W --height H --seeds N --metric KIND [--metric KIND ...]
                        --outdir DIR --workers N --rng-seed S --point X,Y --debug

Metrics:
  euclidean, manhattan, maximum, hamming, canberra, mahalanobis,
  minkowski(P), minimum(INNER)   e.g. minkowski(3), minimum(mahalanobis)
  Omit --metric to render the default set.

Output:
  One PNG per metric in --outdir, named voronoi_<metric>.png, with seed markers.

Exit status:
  0 all metrics rendered, 1 a metric could not be built, 2 unusable output directory.
"""

from __future__ import annotations

import argparse
import time
from pathlib import Path
from typing import List, Optional, Sequence

from .constants import (
    DEFAULT_HEIGHT,
    DEFAULT_SEED_COUNT,
    DEFAULT_WIDTH,
    OUTPUT_DIR,
    OUTPUT_NAME_PATTERN,
    SEED_COLOUR,
    SEED_RADIUS,
)
from .core_types import Point, coerce_points
from .errors import VoronoiError
from .image_io import ensure_output_dir, render_seeds, save_png_rgb
from .metrics import DEFAULT_METRICS, parse_metric
from .palette import as_generator, build_palette
from .raster import default_workers, rasterize
from .seeds import generate_random_seeds
from .utils import (
    debug_log,
    enable_line_buffered_stdout,
    error,
    format_seconds_compact,
    format_throughput,
    log,
    print_config_line,
)

# CLI args & small helpers


def _parse_point(text: str) -> Point:
    """'X,Y' -> Point."""
    parts = [t.strip() for t in text.split(",")]
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected X,Y, got {text!r}")
    try:
        return coerce_points([(int(parts[0]), int(parts[1]))])[0]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected integer X,Y, got {text!r}") from exc


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text!r}")
    return value


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns:
      argparse.Namespace with:
        width, height: raster size
        seeds: random seed count (ignored when --point is given)
        points: fixed seed points, in order
        metric: list of metric names, None for the default set
        outdir: output directory
        seed_radius: marker radius, 0 disables markers
        workers: band workers
        rng_seed: optional int for reproducible seeds and colours
        debug: bool for verbose band/timing details
    """
    parser = argparse.ArgumentParser(
        prog="voronoi_map",
        description="Render Voronoi diagrams of one seed set under several distance metrics.",
    )
    parser.add_argument("--width", type=_positive_int, default=DEFAULT_WIDTH, help="Image width")
    parser.add_argument("--height", type=_positive_int, default=DEFAULT_HEIGHT, help="Image height")
    parser.add_argument(
        "--seeds", type=_positive_int, default=DEFAULT_SEED_COUNT, help="Random seed count"
    )
    parser.add_argument(
        "--point",
        dest="points",
        type=_parse_point,
        action="append",
        default=None,
        help="Fixed seed X,Y (repeatable). Replaces random seeds.",
    )
    parser.add_argument(
        "--metric",
        action="append",
        default=None,
        help="Metric to render (repeatable). Omit for the default set.",
    )
    parser.add_argument(
        "--outdir", type=Path, default=Path(OUTPUT_DIR), help="Output directory"
    )
    parser.add_argument(
        "--seed-radius",
        type=int,
        default=SEED_RADIUS,
        help="Seed marker radius in pixels. 0 disables markers.",
    )
    parser.add_argument(
        "--workers", type=_positive_int, default=default_workers(), help="Band workers"
    )
    parser.add_argument(
        "--rng-seed", type=int, default=None, help="Random seed for points and colours"
    )
    parser.add_argument("--debug", action="store_true", help="Verbose band and timing details")
    return parser.parse_args(argv)


# Per-metric processing


def _render_one(
    metric_text: str,
    args: argparse.Namespace,
    seeds: List[Point],
    palette,
) -> bool:
    """
    Build one metric, rasterize, overlay seeds, save.

    Returns False when the metric cannot be built for this seed set; nothing
    is rasterized in that case.
    """
    try:
        metric = parse_metric(metric_text, seeds)
    except VoronoiError as exc:
        error(f"{metric_text}: {exc}")
        return False

    t_start = time.perf_counter()
    rgb = rasterize(
        args.width,
        args.height,
        seeds,
        metric,
        palette=palette,
        workers=args.workers,
        debug=args.debug,
    )
    t_raster = time.perf_counter()
    if args.seed_radius > 0:
        rgb = render_seeds(rgb, seeds, args.seed_radius, SEED_COLOUR)
    out_path = save_png_rgb(
        args.outdir / OUTPUT_NAME_PATTERN.format(name=metric.name), rgb
    )
    t_end = time.perf_counter()

    log(
        f"Time taken to generate the Voronoi tessellation for {metric.name}: "
        f"{format_seconds_compact(t_end - t_start)}  -> {out_path.name}"
    )
    if args.debug:
        debug_log(
            f"{metric.name}: raster={format_seconds_compact(t_raster - t_start)}  "
            f"save={format_seconds_compact(t_end - t_raster)}  "
            f"throughput={format_throughput(args.width * args.height, t_raster - t_start)}"
        )
    return True


# Entry point


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    CLI entry point.

    Seeds and colours are generated once and shared by every metric so the
    images are directly comparable.
    """
    enable_line_buffered_stdout()
    args = parse_cli_args(argv)

    rng = as_generator(args.rng_seed)
    if args.points:
        seeds = list(args.points)
    else:
        seeds = generate_random_seeds(args.width, args.height, args.seeds, rng)
    palette = build_palette(len(seeds), rng)
    metric_texts = list(args.metric) if args.metric else list(DEFAULT_METRICS)

    print_config_line(
        "run",
        [
            ("Size", f"{args.width}x{args.height}"),
            ("Seeds", len(seeds)),
            ("Metrics", len(metric_texts)),
            ("Workers", args.workers),
        ],
        debug=False,
    )
    if args.debug:
        debug_log("seeds: " + " ".join(f"({p.x},{p.y})" for p in seeds))

    try:
        ensure_output_dir(args.outdir)
    except OSError as exc:
        error(f"cannot create image directory: {exc}")
        return 2

    log(f"Writing images to {args.outdir}")
    failures = 0
    for metric_text in metric_texts:
        if not _render_one(metric_text, args, seeds, palette):
            failures += 1
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
