from __future__ import annotations

from typing import List

import numpy as np

from .colors import Hex, canon_hex, color_formats, format_hsl, hex_to_hsl

TINT_CEILING = 95.0
SHADE_FLOOR = 5.0


def lightness_steps(start: float, stop: float, count: int) -> np.ndarray:
    """
    `count` lightness values strictly between `start` and `stop`.
    The span is cut into count + 1 equal steps; both endpoints are dropped.
    """
    if count < 0:
        raise ValueError("count must be ≥ 0")
    return np.linspace(start, stop, count + 2, dtype=np.float64)[1:-1]


def _ramp(hex_color: Hex, stop: float, count: int) -> List[str]:
    h, s, l = hex_to_hsl(canon_hex(hex_color))
    return [format_hsl(h, s, float(L)) for L in lightness_steps(l, stop, count)]


def generate_tints(hex_color: Hex, count: int) -> List[str]:
    """Lighter variants: lightness from the base up towards 95, hue/sat fixed."""
    return _ramp(hex_color, TINT_CEILING, count)


def generate_shades(hex_color: Hex, count: int) -> List[str]:
    """Darker variants: lightness from the base down towards 5, hue/sat fixed."""
    return _ramp(hex_color, SHADE_FLOOR, count)


def color_variants(hex_color: Hex, tints: int, shades: int) -> dict:
    base = canon_hex(hex_color)
    return {
        "base": base,
        "formats": color_formats(base),
        "tints": generate_tints(base, tints),
        "shades": generate_shades(base, shades),
    }


__all__ = [
    "SHADE_FLOOR",
    "TINT_CEILING",
    "color_variants",
    "generate_shades",
    "generate_tints",
    "lightness_steps",
]
