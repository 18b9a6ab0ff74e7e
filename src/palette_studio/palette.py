"""Brand palette assembly.

Pipeline per palette (pure, deterministic for a given brand list + ordinal):

1. primary  = first brand colour
2. pattern  = PATTERNS[index % 6]
3. neutrals = primary hue, desaturated, pushed light / dark
4. secondary, accent = harmony candidates surviving the contrast pre-filter
5. contrast correction of secondary / accent against the light neutral
6. accessibility report, names, meanings and the templated rationale
"""

from __future__ import annotations

import json
import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from .adjust import ContrastAdjuster
from .colors import HSL, Hex, canon_hex, format_hsl, format_rgb, hex_to_hsl, hex_to_rgb, hsl_to_hex
from .contrast import (
    AA_NORMAL,
    UI_MINIMUM,
    ColorblindHeuristic,
    contrast_ratio,
    cvd_separation,
    passes_aa,
    passes_aaa,
    wcag_grade,
)
from .harmony import PATTERNS, Pattern, filter_accessible, generate_harmony, generate_related_color
from .naming import color_meaning, color_name, palette_name
from .reasoning import COLORBLIND_OK, COLORBLIND_WARN, hue_gap, render_reasoning

log = logging.getLogger(__name__)

WHITE = "#ffffff"
BLACK = "#000000"
PALETTE_COUNT = 20
MAX_BRAND_COLORS = 3

_ID_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_URL, "palette-studio/palettes")


@dataclass(frozen=True)
class PaletteSettings:
    target_contrast: float = AA_NORMAL
    prefilter: bool = True
    prefilter_minimum: float = UI_MINIMUM
    neutral_saturation_cap: float = 10.0
    neutral_offset: float = 40.0
    neutral_light_range: tuple[float, float] = (85.0, 95.0)  # (floor, ceiling)
    neutral_dark_range: tuple[float, float] = (15.0, 20.0)  # (floor, ceiling)
    adjuster: ContrastAdjuster = field(default_factory=ContrastAdjuster)
    colorblind: ColorblindHeuristic = field(default_factory=ColorblindHeuristic)


# --- records -----------------------------------------------------------------


@dataclass(frozen=True)
class ColorInfo:
    name: str
    hex: Hex
    rgb: str
    hsl: str
    meaning: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "hex": self.hex,
            "rgb": self.rgb,
            "hsl": self.hsl,
            "meaning": self.meaning,
        }


@dataclass(frozen=True)
class TextContrast:
    white_contrast: float
    black_contrast: float
    passes_aa: bool
    passes_aaa: bool

    @classmethod
    def measure(cls, background: Hex) -> "TextContrast":
        white = contrast_ratio(WHITE, background)
        black = contrast_ratio(BLACK, background)
        return cls(
            white_contrast=round(white, 2),
            black_contrast=round(black, 2),
            passes_aa=passes_aa(white) or passes_aa(black),
            passes_aaa=passes_aaa(white) or passes_aaa(black),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "whiteContrast": self.white_contrast,
            "blackContrast": self.black_contrast,
            "passesAA": self.passes_aa,
            "passesAAA": self.passes_aaa,
        }


@dataclass(frozen=True)
class PairContrast:
    contrast: float
    passes_aa: bool
    passes_aaa: bool

    @classmethod
    def measure(cls, a: Hex, b: Hex) -> "PairContrast":
        ratio = contrast_ratio(a, b)
        return cls(round(ratio, 2), passes_aa(ratio), passes_aaa(ratio))

    def to_dict(self) -> Dict[str, Any]:
        return {"contrast": self.contrast, "passesAA": self.passes_aa, "passesAAA": self.passes_aaa}


@dataclass(frozen=True)
class Accessibility:
    text_on_primary: TextContrast
    text_on_secondary: TextContrast
    text_on_accent: TextContrast
    primary_on_neutral: PairContrast
    is_color_blind_friendly: bool
    cvd_separation: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "textOnPrimary": self.text_on_primary.to_dict(),
            "textOnSecondary": self.text_on_secondary.to_dict(),
            "textOnAccent": self.text_on_accent.to_dict(),
            "primaryOnNeutral": self.primary_on_neutral.to_dict(),
            "isColorBlindFriendly": self.is_color_blind_friendly,
            "cvdSeparation": dict(self.cvd_separation),
        }


@dataclass(frozen=True)
class Reasoning:
    brand_goals: str
    accessibility_reasoning: str
    harmony_explanation: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "brandGoals": self.brand_goals,
            "accessibilityReasoning": self.accessibility_reasoning,
            "harmonyExplanation": self.harmony_explanation,
        }


@dataclass(frozen=True)
class Palette:
    id: str
    name: str
    pattern: Pattern
    brand_colors: tuple[Hex, ...]
    primary: ColorInfo
    secondary: ColorInfo
    accent: ColorInfo
    neutral_light: ColorInfo
    neutral_dark: ColorInfo
    accessibility: Accessibility
    reasoning: Reasoning

    def roles(self) -> Dict[str, ColorInfo]:
        return {
            "primary": self.primary,
            "secondary": self.secondary,
            "accent": self.accent,
            "neutralLight": self.neutral_light,
            "neutralDark": self.neutral_dark,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "pattern": self.pattern,
            "brandColors": list(self.brand_colors),
            "primary": self.primary.to_dict(),
            "secondary": self.secondary.to_dict(),
            "accent": self.accent.to_dict(),
            "neutral": {
                "light": self.neutral_light.to_dict(),
                "dark": self.neutral_dark.to_dict(),
            },
            "accessibility": self.accessibility.to_dict(),
            "reasoning": self.reasoning.to_dict(),
        }


# --- assembly ----------------------------------------------------------------


def _color_info(hex_color: Hex, role: str, ordinal: int, hsl: Optional[HSL] = None) -> ColorInfo:
    h, s, l = hsl if hsl is not None else hex_to_hsl(hex_color)
    return ColorInfo(
        name=color_name(hex_color, ordinal),
        hex=hex_color,
        rgb=format_rgb(*hex_to_rgb(hex_color)),
        hsl=format_hsl(h, s, l),
        meaning=color_meaning(hex_color, role),
    )


def normalize_brand_colors(brand_colors: Sequence[str]) -> tuple[Hex, ...]:
    colors = tuple(canon_hex(c) for c in brand_colors)
    if not 1 <= len(colors) <= MAX_BRAND_COLORS:
        raise ValueError(f"expected 1–{MAX_BRAND_COLORS} brand colors, got {len(colors)}")
    return colors


def neutral_pair(primary: Hex, settings: PaletteSettings) -> tuple[HSL, HSL]:
    """Desaturated (light, dark) HSL neutrals sharing the primary's hue."""
    h, s, l = hex_to_hsl(primary)
    sat = min(s, settings.neutral_saturation_cap)
    light_floor, light_ceil = settings.neutral_light_range
    dark_floor, dark_ceil = settings.neutral_dark_range
    light = min(light_ceil, max(l + settings.neutral_offset, light_floor))
    dark = max(dark_floor, min(l - settings.neutral_offset, dark_ceil))
    return HSL(h, sat, light), HSL(h, sat, dark)


def _pick_supporting(
    primary: Hex, pattern: Pattern, neutrals: Sequence[Hex], settings: PaletteSettings
) -> tuple[Hex, Hex]:
    candidates = [c for c in generate_harmony(primary, pattern)[1:] if c != primary]
    if settings.prefilter:
        candidates = filter_accessible(candidates, neutrals, settings.prefilter_minimum)
    idx = 0
    while len(candidates) < 2:
        candidates.append(generate_related_color(primary, pattern, idx))
        idx += 1
    return candidates[0], candidates[1]


def generate_palette(
    brand_colors: Sequence[str], index: int = 0, settings: Optional[PaletteSettings] = None
) -> Palette:
    settings = settings or PaletteSettings()
    brand = normalize_brand_colors(brand_colors)
    primary = brand[0]
    pattern = PATTERNS[index % len(PATTERNS)]

    light_hsl, dark_hsl = neutral_pair(primary, settings)
    neutral_light = hsl_to_hex(*light_hsl)
    neutral_dark = hsl_to_hex(*dark_hsl)

    secondary, accent = _pick_supporting(primary, pattern, (neutral_light, neutral_dark), settings)

    target = settings.target_contrast
    adjuster = settings.adjuster
    if contrast_ratio(accent, neutral_light) < target and contrast_ratio(accent, neutral_dark) < target:
        accent = adjuster.adjust(accent, neutral_light, target)
    if contrast_ratio(secondary, neutral_light) < target:
        secondary = adjuster.adjust(secondary, neutral_light, target)

    roles = (primary, secondary, accent)
    colorblind = settings.colorblind.is_friendly(roles)
    accessibility = Accessibility(
        text_on_primary=TextContrast.measure(primary),
        text_on_secondary=TextContrast.measure(secondary),
        text_on_accent=TextContrast.measure(accent),
        primary_on_neutral=PairContrast.measure(primary, neutral_light),
        is_color_blind_friendly=colorblind,
        cvd_separation=cvd_separation(roles),
    )

    p_hsl = hex_to_hsl(primary)
    s_hsl = hex_to_hsl(secondary)
    a_hsl = hex_to_hsl(accent)
    primary_contrast = contrast_ratio(primary, neutral_light)
    params = {
        "primary_hue": p_hsl.h,
        "primary_saturation": p_hsl.s,
        "primary_lightness": p_hsl.l,
        "secondary_hue": s_hsl.h,
        "accent_hue": a_hsl.h,
        "hue_gap": hue_gap(p_hsl.h, s_hsl.h),
        "primary_contrast": primary_contrast,
        "primary_grade": wcag_grade(primary_contrast),
        "aa_count": sum(
            t.passes_aa
            for t in (
                accessibility.text_on_primary,
                accessibility.text_on_secondary,
                accessibility.text_on_accent,
            )
        ),
        "target": target,
        "colorblind": COLORBLIND_OK if colorblind else COLORBLIND_WARN,
    }
    reasoning = Reasoning(**render_reasoning(pattern, params))

    ordinal = index * 5
    palette = Palette(
        id=str(uuid.uuid5(_ID_NAMESPACE, f"{','.join(brand)}:{index}")),
        name=palette_name(index),
        pattern=pattern,
        brand_colors=brand,
        primary=_color_info(primary, "primary", ordinal),
        secondary=_color_info(secondary, "secondary", ordinal + 1),
        accent=_color_info(accent, "accent", ordinal + 2),
        neutral_light=_color_info(neutral_light, "neutral_light", ordinal + 3, light_hsl),
        neutral_dark=_color_info(neutral_dark, "neutral_dark", ordinal + 4, dark_hsl),
        accessibility=accessibility,
        reasoning=reasoning,
    )
    log.debug("palette #%d %s [%s] %s", index, palette.name, pattern, [c.hex for c in palette.roles().values()])
    return palette


def generate_palettes(
    brand_colors: Sequence[str],
    count: int = PALETTE_COUNT,
    settings: Optional[PaletteSettings] = None,
) -> List[Palette]:
    """A batch of `count` palettes, round-robin over the harmony patterns."""
    if count < 0:
        raise ValueError("count must be ≥ 0")
    palettes = [generate_palette(brand_colors, i, settings) for i in range(count)]
    log.info("Generated %d palettes from %s", len(palettes), list(brand_colors))
    return palettes


# --- exports -----------------------------------------------------------------


def _slug(role: str) -> str:
    return "".join("-" + c.lower() if c.isupper() else c for c in role)


def to_css_variables(palette: Palette, prefix: str = "color") -> str:
    lines = [":root {"]
    for role, info in palette.roles().items():
        lines.append(f"  --{prefix}-{_slug(role)}: {info.hex};")
    lines.append("}")
    return "\n".join(lines)


def to_json(palette: Palette) -> str:
    return json.dumps(
        {
            "name": palette.name,
            "colors": {role: info.hex for role, info in palette.roles().items()},
        },
        indent=2,
    )


__all__ = [
    "Accessibility",
    "ColorInfo",
    "MAX_BRAND_COLORS",
    "PALETTE_COUNT",
    "PairContrast",
    "Palette",
    "PaletteSettings",
    "Reasoning",
    "TextContrast",
    "generate_palette",
    "generate_palettes",
    "neutral_pair",
    "normalize_brand_colors",
    "to_css_variables",
    "to_json",
]
