# voronoi_map/image_io.py
from __future__ import annotations

"""
Image output helpers: seed markers, PNG writing, output directory checks.
"""

from pathlib import Path
from typing import Tuple

import numpy as np
from PIL import Image, ImageDraw

from .core_types import Seeds, U8Image


def render_seeds(
    rgb: U8Image,
    seeds: Seeds,
    radius: int = 3,
    colour: Tuple[int, int, int] = (0, 0, 0),
) -> U8Image:
    """
    Draw a filled circle per seed and return a new (H,W,3) array.

    Each marker fills the box [x - r, y - r, x + r - 1, y + r - 1].
    Markers may be clipped at the image edge.
    """
    if rgb.dtype != np.uint8 or rgb.ndim != 3 or rgb.shape[-1] != 3:
        raise TypeError("expected uint8 (H,W,3) image")
    if radius <= 0 or rgb.shape[0] == 0 or rgb.shape[1] == 0:
        return rgb.copy()
    im = Image.fromarray(np.ascontiguousarray(rgb))
    draw = ImageDraw.Draw(im)
    for p in seeds:
        draw.ellipse(
            [p.x - radius, p.y - radius, p.x + radius - 1, p.y + radius - 1],
            fill=tuple(colour),
        )
    return np.array(im, dtype=np.uint8)


def save_png_rgb(path: Path, rgb: U8Image) -> Path:
    """Save an (H,W,3) array as PNG; the suffix is forced to .png."""
    if path.suffix.lower() != ".png":
        path = path.with_suffix(".png")
    Image.fromarray(np.ascontiguousarray(rgb)).save(path)
    return path


def ensure_output_dir(path: Path) -> Path:
    """Create `path` if needed; a regular file in its place is an error."""
    if path.exists() and not path.is_dir():
        raise NotADirectoryError(f"output path is not a directory: {path}")
    path.mkdir(parents=True, exist_ok=True)
    return path


__all__ = ["render_seeds", "save_png_rgb", "ensure_output_dir"]
