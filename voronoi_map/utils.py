# voronoi_map/utils.py
from __future__ import annotations

"""
Shared utilities for voronoi_map.

Elapsed-time and throughput formatting plus the print-based log lines used
by the rasterizer and the CLI.
"""

import sys
from typing import Any, Iterable, List, Optional, TextIO, Tuple


#  Timing


def format_seconds_compact(seconds: float) -> str:
    """Elapsed time as '12.5ms', '3.210s' or '2m 5.0s'."""
    if seconds >= 60.0:
        minutes, rest = divmod(seconds, 60.0)
        return f"{int(minutes)}m {rest:.1f}s"
    if seconds >= 1.0:
        return f"{seconds:.3f}s"
    return f"{seconds * 1e3:.1f}ms"


def format_throughput(pixels: int, seconds: float) -> str:
    """Megapixels per second, or '-' when the elapsed time is zero."""
    if seconds <= 0.0:
        return "-"
    return f"{(pixels / seconds) / 1e6:.2f} MPx/s"


# Log lines


def format_number_compact(value: Any) -> str:
    """on/off for bools, 1,234 for ints, trimmed 3-decimal floats, str() otherwise."""
    if value is True or value is False:
        return "on" if value else "off"
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        return f"{value:.3f}".rstrip("0").rstrip(".")
    return str(value)


def key_value_pairs_to_string(
    pairs: Iterable[Tuple[str, Any]], sep: str = "  ", eq: str = ": "
) -> str:
    """Format (name, value) pairs as 'Name: value' blocks separated by sep."""
    out: List[str] = []
    for name, value in pairs:
        out.append(f"{name}{eq}{format_number_compact(value)}")
    return sep.join(out)


def _emit(message: str, tag: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    line = message if tag is None else f"[{tag}] {message}"
    print(line, file=stream, flush=True)


def log(message: str) -> None:
    _emit(message)


def debug_log(message: str) -> None:
    """Verbose line, only emitted by callers running with --debug."""
    _emit(message, "debug")


def error(message: str) -> None:
    """Failure line on stderr."""
    _emit(message, "error", sys.stderr)


def print_config_line(
    section: str, pairs: Iterable[Tuple[str, Any]], debug: bool
) -> None:
    """
    Emit one config line, e.g.:
      [run] Size: 2048x1025  Seeds: 45  Workers: 8
    Goes through debug_log() when debug=True, else log().
    """
    line = f"[{section}] {key_value_pairs_to_string(pairs)}"
    (debug_log if debug else log)(line)


def enable_line_buffered_stdout() -> None:
    """Enable line-buffered stdout when the stream supports reconfigure()."""
    reconfig = getattr(sys.stdout, "reconfigure", None)
    if callable(reconfig):
        try:
            reconfig(line_buffering=True, write_through=True)
        except (OSError, ValueError):
            pass


__all__ = [
    "format_seconds_compact",
    "format_throughput",
    "format_number_compact",
    "key_value_pairs_to_string",
    "print_config_line",
    "log",
    "debug_log",
    "error",
    "enable_line_buffered_stdout",
]
