"""Deterministic colour names and "meaning" blurbs.

A colour is bucketed by hue (and by saturation for greys); the ordinal picks
an entry from the bucket's name list, lightness/saturation pick a prefix.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from .colors import hex_to_hsl

PALETTE_NAMES: Tuple[str, ...] = (
    "Oceanic Harmony", "Digital Bloom", "Urban Elegance", "Sunset Gradient",
    "Forest Whisper", "Tech Innovator", "Royal Contrast", "Earthy Balance",
    "Vivid Dimension", "Subtle Professional", "Cosmic Journey", "Mellow Tones",
    "Bold Statement", "Tranquil Space", "Vibrant Clarity", "Minimal Contrast",
    "Deep Ocean", "Soft Dawn", "Electric Vision", "Classic Refined",
)

# (upper hue bound exclusive, family)
_HUE_BUCKETS: Tuple[Tuple[float, str], ...] = (
    (15, "red"),
    (45, "orange"),
    (70, "yellow"),
    (160, "green"),
    (195, "teal"),
    (255, "blue"),
    (290, "purple"),
    (345, "pink"),
    (360, "red"),
)

_NAMES: Dict[str, List[str]] = {
    "red": ["Ruby Red", "Crimson Red", "Scarlet", "Cherry"],
    "orange": ["Sunset Orange", "Tangerine", "Amber", "Copper"],
    "yellow": ["Golden Yellow", "Saffron", "Honey", "Lemon"],
    "green": ["Forest Green", "Emerald Green", "Mint Green", "Olive Green"],
    "teal": ["Turquoise Blue", "Lagoon Teal", "Aqua", "Seafoam"],
    "blue": ["Ocean Blue", "Sapphire Blue", "Sky Blue", "Navy Blue"],
    "purple": ["Royal Purple", "Amethyst Purple", "Lavender Purple", "Plum"],
    "pink": ["Coral Pink", "Magenta Pink", "Rose", "Fuchsia"],
    "gray": ["Slate Gray", "Charcoal Gray", "Silver", "Ash"],
}

_MEANINGS: Dict[str, str] = {
    "red": "energy, urgency and passion",
    "orange": "enthusiasm and approachable warmth",
    "yellow": "optimism and clarity",
    "green": "growth, balance and freshness",
    "teal": "calm sophistication and clarity",
    "blue": "trust and reliability",
    "purple": "creativity and a sense of premium quality",
    "pink": "playfulness and compassion",
    "gray": "neutral professionalism and restraint",
}

_ROLE_MEANINGS: Dict[str, str] = {
    "primary": "This {family} evokes {meaning}, making it ideal for establishing brand authority.",
    "secondary": (
        "This {family} conveys {meaning} and creates a balanced contrast with the "
        "primary color, enhancing visual hierarchy."
    ),
    "accent": (
        "This {tone}{family} brings {meaning} to key elements, perfect for "
        "calls-to-action and highlights."
    ),
    "neutral_light": (
        "This light neutral creates breathing room and improves readability in "
        "text-heavy sections."
    ),
    "neutral_dark": (
        "This dark neutral provides strong contrast and depth, excellent for text "
        "and important UI elements."
    ),
}

GRAY_SATURATION = 12


def hue_family(h: float, s: float) -> str:
    if s < GRAY_SATURATION:
        return "gray"
    h = h % 360.0
    for bound, family in _HUE_BUCKETS:
        if h < bound:
            return family
    return "red"


def _prefix(s: float, l: float) -> str:
    if l >= 80:
        return "Pale"
    if l >= 65:
        return "Soft"
    if l <= 25:
        return "Deep"
    if s >= 80:
        return "Vivid"
    return ""


def color_name(hex_color: str, ordinal: int) -> str:
    h, s, l = hex_to_hsl(hex_color)
    names = _NAMES[hue_family(h, s)]
    name = names[ordinal % len(names)]
    prefix = _prefix(s, l)
    return f"{prefix} {name}" if prefix else name


def color_meaning(hex_color: str, role: str) -> str:
    h, s, l = hex_to_hsl(hex_color)
    family = hue_family(h, s)
    tone = "vibrant " if s >= 60 else "muted " if s < 30 else ""
    template = _ROLE_MEANINGS.get(role, _ROLE_MEANINGS["secondary"])
    return template.format(family=family, meaning=_MEANINGS[family], tone=tone)


def palette_name(index: int) -> str:
    return PALETTE_NAMES[index % len(PALETTE_NAMES)]


__all__ = [
    "PALETTE_NAMES",
    "color_meaning",
    "color_name",
    "hue_family",
    "palette_name",
]
