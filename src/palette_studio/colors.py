# colors.py – hex / rgb() / hsl() conversion
#   - hex channels parsed base-16, malformed pairs become NaN (no exception)
#   - every integer channel / percent uses round-half-up, like Math.round
#   - convert_color() never raises: unknown input is logged and echoed back

from __future__ import annotations

import logging
import math
import re
import string
from typing import Literal, NamedTuple, Optional

log = logging.getLogger(__name__)

Hex = str
Format = Literal["hex", "rgb", "hsl"]

FORMATS: tuple[Format, ...] = ("hex", "rgb", "hsl")


class RGB(NamedTuple):
    r: float
    g: float
    b: float


class HSL(NamedTuple):
    h: float
    s: float
    l: float


# --- patterns ----------------------------------------------------------------
# comma- or space-separated groups; hue may carry "deg", s/l may be fractional
_SEP = r"\s*(?:,\s*|\s+)"
_NUM = r"(\d+(?:\.\d+)?)"
_HSL_RE = re.compile(
    rf"^hsla?\(\s*{_NUM}(?:deg)?{_SEP}{_NUM}%{_SEP}{_NUM}%\s*\)$", re.IGNORECASE
)
_RGB_RE = re.compile(rf"^rgba?\(\s*{_NUM}{_SEP}{_NUM}{_SEP}{_NUM}\s*\)$", re.IGNORECASE)
_HEX_RE = re.compile(r"^#?([0-9a-f]{6}|[0-9a-f]{3})$", re.IGNORECASE)


def round_half_up(x: float) -> int:
    """Round to nearest, .5 away from zero for positive inputs (Math.round). NaN raises ValueError."""
    if math.isnan(x):
        raise ValueError("cannot round a NaN channel; validate the color with parse_color first")
    return int(math.floor(x + 0.5))



def _fmt_pct(x: float) -> str:
    # at most two decimals, no trailing zeros: 60 → "60", 73.3333 → "73.33"
    return f"{x:.2f}".rstrip("0").rstrip(".")


def canon_hex(s: str) -> Hex:
    """Normalize to '#rrggbb'; accept 3- or 6-digit hex only."""
    raw = (s or "").strip().lstrip("#")
    if len(raw) == 3 and all(c in string.hexdigits for c in raw):
        raw = "".join(ch * 2 for ch in raw)
    if len(raw) != 6 or not all(c in string.hexdigits for c in raw):
        raise ValueError(f"invalid hex color: {s!r}")
    return "#" + raw.lower()


# --- primitive conversions ---------------------------------------------------


def _hex_pair(pair: str) -> float:
    # parseInt semantics: leading hex digits count, nothing parsable → NaN
    digits = ""
    for ch in pair:
        if ch not in string.hexdigits:
            break
        digits += ch
    return int(digits, 16) if digits else math.nan


def hex_to_rgb(hex_color: str) -> RGB:
    """
    Channels of a "#rrggbb" string; a malformed pair yields NaN instead of
    raising. NaN channels are rejected by rgb_to_hex and rgb_to_hsl, so
    callers that pass the result on must check it (parse_color does).
    """
    clean = hex_color.replace("#", "", 1)
    return RGB(_hex_pair(clean[0:2]), _hex_pair(clean[2:4]), _hex_pair(clean[4:6]))


def rgb_to_hex(r: float, g: float, b: float) -> Hex:
    out = "#"
    for v in (r, g, b):
        out += f"{max(0, min(255, round_half_up(v))):02x}"
    return out


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """RGB channels in [0,255] → integer (h°, s%, l%)."""
    r, g, b = r / 255.0, g / 255.0, b / 255.0
    mx = max(r, g, b)
    mn = min(r, g, b)
    h = s = 0.0
    l = (mx + mn) / 2.0

    if mx != mn:
        d = mx - mn
        s = d / (2.0 - mx - mn) if l > 0.5 else d / (mx + mn)
        if mx == r:
            h = (g - b) / d + (6.0 if g < b else 0.0)
        elif mx == g:
            h = (b - r) / d + 2.0
        else:
            h = (r - g) / d + 4.0
        h /= 6.0

    return HSL(round_half_up(h * 360.0) % 360, round_half_up(s * 100.0), round_half_up(l * 100.0))


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """Normalized h, s, l in [0,1] → integer RGB channels in [0,255]."""
    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_rgb(p, q, h + 1 / 3)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1 / 3)
    return RGB(*(min(255, max(0, round_half_up(c * 255))) for c in (r, g, b)))


def hsl_to_hex(h: float, s: float, l: float) -> Hex:
    """Degrees / percents → hex."""
    return rgb_to_hex(*hsl_to_rgb((h % 360.0) / 360.0, s / 100.0, l / 100.0))


def hex_to_hsl(hex_color: str) -> HSL:
    return rgb_to_hsl(*hex_to_rgb(canon_hex(hex_color)))


def format_rgb(r: float, g: float, b: float) -> str:
    return f"rgb({int(r)}, {int(g)}, {int(b)})"


def format_hsl(h: float, s: float, l: float) -> str:
    return f"hsl({_fmt_pct(h)}, {_fmt_pct(s)}%, {_fmt_pct(l)}%)"


# --- string-level API --------------------------------------------------------


def _sniff(color: str) -> Optional[Format]:
    c = color.strip().lower()
    if c.startswith("#"):
        return "hex"
    if c.startswith("hsl"):
        return "hsl"
    if c.startswith("rgb"):
        return "rgb"
    return None


def _parse_hsl(color: str) -> Optional[HSL]:
    m = _HSL_RE.match(color.strip())
    if not m:
        return None
    h, s, l = (float(x) for x in m.groups())
    return HSL(h % 360.0, min(100.0, s), min(100.0, l))


def _parse_rgb(color: str) -> Optional[RGB]:
    m = _RGB_RE.match(color.strip())
    if not m:
        return None
    r, g, b = (min(255, round_half_up(float(x))) for x in m.groups())
    return RGB(r, g, b)


def parse_color(color: str) -> Optional[RGB]:
    """Any of the three encodings → RGB, or None when unparsable."""
    fmt = _sniff(color)
    if fmt == "hex":
        if not _HEX_RE.match(color.strip()):
            return None
        return hex_to_rgb(canon_hex(color))
    if fmt == "rgb":
        return _parse_rgb(color)
    if fmt == "hsl":
        hsl = _parse_hsl(color)
        if hsl is None:
            return None
        return hsl_to_rgb(hsl.h / 360.0, hsl.s / 100.0, hsl.l / 100.0)
    return None


def convert_color(color: str, target: Format) -> str:
    """
    Convert between '#rrggbb', 'rgb(r, g, b)' and 'hsl(h, s%, l%)'.
    Input already in `target` format is returned as is. Anything that
    cannot be parsed is returned unchanged (and logged), never raised.
    """
    if target not in FORMATS:
        log.warning("Unknown target format %r for %r", target, color)
        return color

    fmt = _sniff(color)
    if fmt is None:
        log.warning("Unknown color format: %r", color)
        return color
    if fmt == target:
        return color

    rgb = parse_color(color)
    if rgb is None:
        log.warning("%s format not recognized: %r", fmt.upper(), color)
        return color

    if target == "hex":
        return rgb_to_hex(*rgb)
    if target == "rgb":
        return format_rgb(*rgb)
    return format_hsl(*rgb_to_hsl(*rgb))


def color_formats(color: str) -> dict[str, str]:
    return {fmt: convert_color(color, fmt) for fmt in FORMATS}


def is_color_light(color: str) -> bool:
    """Perceived brightness > 0.5 (HSL input: lightness > 50). Unknown → light."""
    fmt = _sniff(color)
    if fmt == "hsl":
        hsl = _parse_hsl(color)
        return True if hsl is None else hsl.l > 50
    rgb = parse_color(color) if fmt else None
    if rgb is None or any(math.isnan(c) for c in rgb):
        return True
    brightness = (rgb.r * 0.299 + rgb.g * 0.587 + rgb.b * 0.114) / 255.0
    return brightness > 0.5


__all__ = [
    "FORMATS",
    "HSL",
    "RGB",
    "canon_hex",
    "color_formats",
    "convert_color",
    "format_hsl",
    "format_rgb",
    "hex_to_hsl",
    "hex_to_rgb",
    "hsl_to_hex",
    "hsl_to_rgb",
    "is_color_light",
    "parse_color",
    "rgb_to_hex",
    "rgb_to_hsl",
    "round_half_up",
]
