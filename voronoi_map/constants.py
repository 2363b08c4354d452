# voronoi_map/constants.py
"""
Defaults and tunables used across the project.

- Raster and seed defaults for the CLI run
- Seed marker look
- Default colour list (hex, name)
"""
from __future__ import annotations

from typing import List, Tuple

# =========================
# Run defaults
# =========================
DEFAULT_WIDTH: int = 2048
DEFAULT_HEIGHT: int = 1025
DEFAULT_SEED_COUNT: int = 45

OUTPUT_DIR: str = "images"
OUTPUT_NAME_PATTERN: str = "voronoi_{name}.png"

# =========================
# Seed markers
# =========================
SEED_RADIUS: int = 4
SEED_COLOUR: Tuple[int, int, int] = (0, 0, 0)

# =========================
# Default colours (hex, name)
# Used when there are at least as many entries as seeds.
# =========================
DEFAULT_COLOURS: List[Tuple[str, str]] = [
    ("#ff0000", "Red"),
    ("#00ff00", "Green"),
    ("#0000ff", "Blue"),
    ("#ffff00", "Yellow"),
    ("#ffc800", "Orange"),
    ("#ff00ff", "Magenta"),
    ("#00ffff", "Cyan"),
    ("#ffafaf", "Pink"),
    ("#000000", "Black"),
    ("#808080", "Gray"),
    ("#c0c0c0", "Light Gray"),
    ("#404040", "Dark Gray"),
    ("#ffc800", "Orange"),
]
