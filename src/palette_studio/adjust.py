# adjust.py – nudge a colour's HSL lightness until it meets a contrast target
#   - local hill-climb: the direction is decided once, from the initial ratio
#   - more contrast: head for whichever end (black or white) contrasts more
#     with the reference; less contrast: head towards the reference
#   - once a step crosses the target, bisect between the two bracketing
#     lightness values instead of running on to the bound
#   - stops within `tolerance` of the target, after `max_iterations`, or
#     when lightness reaches either bound without crossing the target
#   - no failure signal; the last candidate is the best effort

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .colors import Hex, hsl_to_hex, parse_color, rgb_to_hex, rgb_to_hsl
from .contrast import AA_NORMAL, contrast_from_luminance, contrast_ratio, luminance

log = logging.getLogger(__name__)

# (lightness, hex, ratio)
_Probe = Tuple[float, Hex, float]


@dataclass(frozen=True)
class ContrastAdjuster:
    step: float = 5.0
    tolerance: float = 0.2
    max_iterations: int = 20
    lightness_bounds: tuple[float, float] = (5.0, 95.0)

    def adjust(self, color: str, reference: str, target: float = AA_NORMAL) -> Hex:
        rgb = parse_color(color)
        if rgb is None:
            raise ValueError(f"cannot adjust unparsable color {color!r}")
        start = rgb_to_hex(*rgb)
        initial = contrast_ratio(start, reference)
        if abs(initial - target) <= self.tolerance:
            return start

        below = initial < target
        direction = self._direction(start, reference, below)
        h, s, l = rgb_to_hsl(*rgb)
        lo, hi = self.lightness_bounds

        prev: _Probe = (l, start, initial)
        current = prev
        # (same side as the start, other side of the target)
        bracket: Optional[Tuple[_Probe, _Probe]] = None
        for i in range(max(0, int(self.max_iterations))):
            if bracket is None:
                l = min(hi, max(lo, l + direction * self.step))
            else:
                l = (bracket[0][0] + bracket[1][0]) / 2.0
            candidate = hsl_to_hex(h, s, l)
            ratio = contrast_ratio(candidate, reference)
            current = (l, candidate, ratio)
            log.debug("adjust %s vs %s: #%d l=%g ratio=%.2f", start, reference, i, l, ratio)

            if abs(ratio - target) <= self.tolerance:
                break
            crossed = (ratio < target) != below
            if bracket is not None:
                bracket = (bracket[0], current) if crossed else (current, bracket[1])
            elif crossed:
                bracket = (prev, current)
            elif l in (lo, hi):
                break
            prev = current

        if bracket is not None and abs(current[2] - target) > self.tolerance:
            current = min(bracket, key=lambda p: abs(p[2] - target))

        log.debug(
            "adjusted %s → %s (%.2f → %.2f, target %.2f)", start, current[1], initial, current[2], target
        )
        return current[1]

    # ---- internals ----

    @staticmethod
    def _direction(color: Hex, reference: str, need_more: bool) -> int:
        ref = luminance(reference)
        if need_more:
            # darken when black contrasts more with the reference than white does
            return -1 if contrast_from_luminance(ref, 0.0) >= contrast_from_luminance(ref, 1.0) else 1
        return 1 if ref >= luminance(color) else -1


def adjust_color_for_contrast(
    color: str,
    reference: str,
    target: float = AA_NORMAL,
    *,
    step: float = 5.0,
    tolerance: float = 0.2,
    max_iterations: int = 20,
    lightness_bounds: tuple[float, float] = (5.0, 95.0),
) -> Hex:
    return ContrastAdjuster(
        step=step,
        tolerance=tolerance,
        max_iterations=max_iterations,
        lightness_bounds=lightness_bounds,
    ).adjust(color, reference, target)


__all__ = ["ContrastAdjuster", "adjust_color_for_contrast"]
