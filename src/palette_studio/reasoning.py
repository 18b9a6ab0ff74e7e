from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class RationaleTemplate:
    brand_goals: str
    harmony: str


ACCESSIBILITY_TEMPLATE = (
    "Primary text on the light neutral reaches {primary_contrast:.2f}:1 ({primary_grade}). "
    "{aa_count} of 3 brand colors support AA-compliant text in white or black, and the "
    "secondary and accent were tuned towards a {target:.1f}:1 target against the light "
    "neutral. {colorblind}"
)

COLORBLIND_OK = (
    "Red/green separation and luminance spread keep the roles distinguishable for "
    "most color-vision deficiencies."
)
COLORBLIND_WARN = (
    "Some roles rely on hue alone; pair them with icons or labels for viewers with "
    "color-vision deficiencies."
)

RATIONALES: Dict[str, RationaleTemplate] = {
    "complementary": RationaleTemplate(
        brand_goals=(
            "Anchored on your brand hue at {primary_hue}°, this palette pairs it with its "
            "opposite at {secondary_hue}° to create bold, confident contrast suited to "
            "brands that want to stand out."
        ),
        harmony=(
            "Complementary colors sit {hue_gap}° apart on the color wheel. The accent at "
            "{accent_hue}° keeps the energy of the pairing while saturation "
            "({primary_saturation}%) and lightness ({primary_lightness}%) variants add depth."
        ),
    ),
    "analogous": RationaleTemplate(
        brand_goals=(
            "Neighbouring hues around {primary_hue}° give a cohesive, calm identity that "
            "feels deliberate without competing with your brand color."
        ),
        harmony=(
            "Analogous colors stay within {hue_gap}° of the primary; the secondary at "
            "{secondary_hue}° and accent at {accent_hue}° drift gently in saturation and "
            "lightness around the primary's {primary_saturation}% / {primary_lightness}%."
        ),
    ),
    "triadic": RationaleTemplate(
        brand_goals=(
            "A triadic scheme around {primary_hue}° balances vibrancy and variety, giving "
            "a playful yet structured personality."
        ),
        harmony=(
            "The three hues at {primary_hue}°, {secondary_hue}° and {accent_hue}° are "
            "evenly spaced by 120°; reduced-saturation variants of the outer hues keep "
            "the {primary_saturation}% primary in charge."
        ),
    ),
    "split-complementary": RationaleTemplate(
        brand_goals=(
            "Split-complementary colors keep the punch of a complementary pairing around "
            "{primary_hue}° while softening the tension, for a versatile, modern feel."
        ),
        harmony=(
            "Instead of the direct opposite, the palette uses the two hues flanking it at "
            "{secondary_hue}° and {accent_hue}°, {hue_gap}° from the primary, with "
            "symmetric lightness offsets around {primary_lightness}%."
        ),
    ),
    "square": RationaleTemplate(
        brand_goals=(
            "A square scheme built from {primary_hue}° offers a rich, expressive range for "
            "brands with many product lines or content categories."
        ),
        harmony=(
            "Four hues spaced 90° apart give the secondary at {secondary_hue}° and the "
            "accent at {accent_hue}°; letting the {primary_saturation}% primary dominate "
            "keeps the scheme balanced."
        ),
    ),
    "monochromatic": RationaleTemplate(
        brand_goals=(
            "Staying on a single hue of {primary_hue}° creates a focused, elegant identity "
            "that reinforces brand recognition at every touchpoint."
        ),
        harmony=(
            "All colors share the hue {primary_hue}°; hierarchy comes from saturation and "
            "lightness steps around the primary's {primary_saturation}% / "
            "{primary_lightness}%."
        ),
    ),
}


def hue_gap(a: float, b: float) -> int:
    d = abs(a - b) % 360
    return int(min(d, 360 - d))


def render_reasoning(pattern: str, params: Mapping[str, Any]) -> Dict[str, str]:
    """Fill the pattern's templates; `params` must carry every placeholder."""
    tpl = RATIONALES[pattern]
    return {
        "brand_goals": tpl.brand_goals.format(**params),
        "accessibility_reasoning": ACCESSIBILITY_TEMPLATE.format(**params),
        "harmony_explanation": tpl.harmony.format(**params),
    }


__all__ = [
    "ACCESSIBILITY_TEMPLATE",
    "COLORBLIND_OK",
    "COLORBLIND_WARN",
    "RATIONALES",
    "RationaleTemplate",
    "hue_gap",
    "render_reasoning",
]
