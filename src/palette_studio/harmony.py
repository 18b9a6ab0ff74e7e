from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Literal, Sequence, Tuple, cast

from .colors import Hex, canon_hex, hex_to_hsl, hsl_to_hex
from .contrast import UI_MINIMUM, contrast_ratio

log = logging.getLogger(__name__)

Pattern = Literal[
    "complementary",
    "analogous",
    "triadic",
    "split-complementary",
    "square",
    "monochromatic",
]

# round-robin order used by the palette assembler
PATTERNS: Tuple[Pattern, ...] = (
    "complementary",
    "analogous",
    "triadic",
    "split-complementary",
    "square",
    "monochromatic",
)

MAX_HARMONY_COLORS = 6

Offset = Tuple[float, float, float]  # Δhue°, Δsaturation%, Δlightness%


@dataclass(frozen=True)
class HarmonyRule:
    offsets: Tuple[Offset, ...]
    lightness_band: Tuple[float, float] = (0.0, 100.0)
    saturation_band: Tuple[float, float] = (0.0, 100.0)


# The base colour (0, 0, 0) is implicit and always emitted first.
HARMONY_RULES: Dict[str, HarmonyRule] = {
    "complementary": HarmonyRule(
        offsets=(
            (180, 0, 0),
            (0, -20, 25),
            (180, 15, -15),
            (180, -15, 20),
        ),
        lightness_band=(15, 90),
    ),
    "analogous": HarmonyRule(
        offsets=(
            (30, 0, 0),
            (-30, 0, 0),
            (60, -10, 10),
            (-60, -10, -10),
        ),
        lightness_band=(20, 80),
    ),
    "triadic": HarmonyRule(
        offsets=(
            (120, 0, 0),
            (240, 0, 0),
            (120, -25, 10),
            (240, -25, -10),
        ),
        lightness_band=(20, 80),
    ),
    "split-complementary": HarmonyRule(
        offsets=(
            (150, 0, 0),
            (210, 0, 0),
            (150, 0, 15),
            (210, 0, -15),
        ),
        lightness_band=(20, 80),
    ),
    "square": HarmonyRule(
        offsets=(
            (90, 0, 0),
            (180, 0, 0),
            (270, 0, 0),
            (45, -30, 0),
        ),
        lightness_band=(20, 80),
    ),
    "monochromatic": HarmonyRule(
        offsets=(
            (0, 0, 20),
            (0, 0, -20),
            (0, -30, 10),
            (0, 15, -10),
        ),
        lightness_band=(10, 90),
        saturation_band=(5, 100),
    ),
}


def _clamp(x: float, band: Tuple[float, float]) -> float:
    lo, hi = band
    return hi if x > hi else lo if x < lo else x


def _check_pattern(pattern: str) -> Pattern:
    if pattern not in HARMONY_RULES:
        raise ValueError(f"unknown harmony pattern '{pattern}'")
    return cast(Pattern, pattern)


def generate_harmony(base_hex: Hex, pattern: str) -> List[Hex]:
    """Base colour followed by its related colours under `pattern` (≤ 6 total)."""
    rule = HARMONY_RULES[_check_pattern(pattern)]
    base = canon_hex(base_hex)
    h, s, l = hex_to_hsl(base)

    out: List[Hex] = [base]
    for dh, ds, dl in rule.offsets:
        hi = (h + dh) % 360.0
        si = _clamp(s + ds, rule.saturation_band)
        li = _clamp(l + dl, rule.lightness_band)
        out.append(hsl_to_hex(hi, si, li))
    log.debug("harmony %s(%s) → %s", pattern, base, out)
    return out[:MAX_HARMONY_COLORS]


def related_offset(pattern: Pattern, index: int) -> Offset:
    """
    Single related colour offset for the `index`-th call.
    Magnitudes grow with ceil((index + 1) / 2); the sign alternates with parity.
    """
    step = math.ceil((index + 1) / 2)
    sign = 1 if index % 2 == 0 else -1
    if pattern == "complementary":
        return 180 + sign * 15 * (step - 1), -10 * index, sign * 10 * step
    if pattern == "analogous":
        return sign * 30 * step, -5 * step, sign * 5 * step
    if pattern == "triadic":
        return 120 * (index % 2 + 1), -10 * (index // 2), 0
    if pattern == "split-complementary":
        return 180 + sign * 30, 0, sign * 5 * step
    if pattern == "square":
        return 90 * (index % 3 + 1), 0, 0
    # monochromatic
    return 0, -15 * step, sign * 20 * step


def generate_related_color(base_hex: Hex, pattern: str, index: int) -> Hex:
    """One related colour; fan out secondary/accent with index 0, 1, ..."""
    if index < 0:
        raise ValueError("index must be ≥ 0")
    dh, ds, dl = related_offset(_check_pattern(pattern), index)
    h, s, l = hex_to_hsl(base_hex)
    return hsl_to_hex((h + dh) % 360.0, _clamp(s + ds, (0, 100)), _clamp(l + dl, (15, 85)))


def filter_accessible(
    candidates: Sequence[Hex], references: Sequence[Hex], minimum: float = UI_MINIMUM
) -> List[Hex]:
    """
    Drop candidates that reach `minimum` contrast against none of `references`.
    When nothing would survive, the candidates are returned untouched.
    """
    kept = [
        c for c in candidates if any(contrast_ratio(c, ref) >= minimum for ref in references)
    ]
    if not kept:
        log.debug("accessibility pre-filter removed every candidate; keeping all")
        return list(candidates)
    return kept


__all__ = [
    "HARMONY_RULES",
    "HarmonyRule",
    "MAX_HARMONY_COLORS",
    "PATTERNS",
    "Pattern",
    "filter_accessible",
    "generate_harmony",
    "generate_related_color",
    "related_offset",
]
