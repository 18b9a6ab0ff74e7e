# contrast.py – WCAG 2.x relative luminance and contrast ratio
#   - sRGB linearization with the WCAG threshold 0.03928
#   - Rec. 709 weights 0.2126 / 0.7152 / 0.0722
#   - colour-vision-deficiency checks: a cheap channel/luminance heuristic
#     plus a ColorAide protan/deutan/tritan simulation

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import Dict, Iterable, Sequence

import numpy as np
from coloraide import Color

from .colors import RGB, parse_color

log = logging.getLogger(__name__)

# --- thresholds --------------------------------------------------------------
AA_NORMAL = 4.5
AAA_NORMAL = 7.0
UI_MINIMUM = 3.0  # large text / UI components

_THRESHOLD = 0.03928
_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)

CVD_KINDS = ("protan", "deutan", "tritan")


def _linearize(rgb: np.ndarray) -> np.ndarray:
    v = np.asarray(rgb, dtype=np.float64) / 255.0
    return np.where(v <= _THRESHOLD, v / 12.92, ((v + 0.055) / 1.055) ** 2.4)


def relative_luminance(r: float, g: float, b: float) -> float:
    return float(_WEIGHTS @ _linearize(np.array([r, g, b])))


def _rgb(color: str) -> RGB:
    rgb = parse_color(color)
    if rgb is None:
        raise ValueError(f"cannot measure contrast of {color!r}")
    return rgb


def luminance(color: str) -> float:
    """Relative luminance of a hex / rgb() / hsl() string."""
    return relative_luminance(*_rgb(color))


def contrast_from_luminance(l1: float, l2: float) -> float:
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def contrast_ratio(color_a: str, color_b: str) -> float:
    """WCAG contrast ratio in [1, 21]; symmetric in its arguments."""
    return contrast_from_luminance(luminance(color_a), luminance(color_b))


def passes_aa(ratio: float) -> bool:
    return ratio >= AA_NORMAL


def passes_aaa(ratio: float) -> bool:
    return ratio >= AAA_NORMAL


def wcag_grade(ratio: float) -> str:
    if ratio >= AAA_NORMAL:
        return "AAA"
    if ratio >= AA_NORMAL:
        return "AA"
    if ratio >= UI_MINIMUM:
        return "AA-Large"
    return "Fail"


@dataclass(frozen=True)
class ColorblindHeuristic:
    """
    Coarse colour-blind friendliness check, not a simulation.
    Friendly when some colour separates red from green by more than
    `channel_delta` and some pair differs in luminance by more than
    `luminance_delta`.
    """

    channel_delta: float = 30.0
    luminance_delta: float = 0.2

    def is_friendly(self, colors: Sequence[str]) -> bool:
        rgbs = [_rgb(c) for c in colors]
        red_green = any(abs(c.r - c.g) > self.channel_delta for c in rgbs)
        lums = [relative_luminance(*c) for c in rgbs]
        spread = any(abs(a - b) > self.luminance_delta for a, b in combinations(lums, 2))
        return red_green and spread


def simulate_cvd(color: str, kind: str, severity: float = 1.0) -> Color:
    if kind not in CVD_KINDS:
        raise ValueError(f"unknown deficiency '{kind}'")
    return Color(color).filter(kind, severity)


def cvd_separation(colors: Iterable[str]) -> Dict[str, float]:
    """
    Minimum pairwise ΔE2000 between `colors` as seen with each deficiency.
    Small values mean two roles collapse into one for that viewer.
    """
    hexes = list(colors)
    if len(hexes) < 2:
        return {kind: 0.0 for kind in CVD_KINDS}
    out: Dict[str, float] = {}
    for kind in CVD_KINDS:
        sim = [simulate_cvd(c, kind) for c in hexes]
        out[kind] = round(min(a.delta_e(b, method="2000") for a, b in combinations(sim, 2)), 2)
    log.debug("CVD separation %s → %s", hexes, out)
    return out


__all__ = [
    "AAA_NORMAL",
    "AA_NORMAL",
    "CVD_KINDS",
    "ColorblindHeuristic",
    "UI_MINIMUM",
    "contrast_from_luminance",
    "contrast_ratio",
    "cvd_separation",
    "luminance",
    "passes_aa",
    "passes_aaa",
    "relative_luminance",
    "simulate_cvd",
    "wcag_grade",
]
