import json
import re

import pytest

from palette_studio.colors import hex_to_hsl, hsl_to_hex
from palette_studio.contrast import ColorblindHeuristic, contrast_ratio
from palette_studio.harmony import PATTERNS, generate_related_color
from palette_studio.naming import PALETTE_NAMES
from palette_studio.palette import (
    PaletteSettings,
    _pick_supporting,
    generate_palette,
    generate_palettes,
    neutral_pair,
    to_css_variables,
    to_json,
)

HSL = re.compile(r"hsl\((\d+(?:\.\d+)?), (\d+(?:\.\d+)?)%, (\d+(?:\.\d+)?)%\)")


def hsl_of(info):
    return tuple(float(x) for x in HSL.fullmatch(info.hsl).groups())


def hue_distance(a, b):
    d = abs(a - b) % 360
    return min(d, 360 - d)


@pytest.fixture(scope="module")
def batch():
    return generate_palettes(["#3b82f6"])


def test_complementary_secondary_hue():
    p = generate_palette(["#3b82f6"], 0)
    assert p.pattern == "complementary"
    assert p.primary.hex == "#3b82f6"
    assert hue_distance(hex_to_hsl(p.secondary.hex).h, (217 + 180) % 360) <= 5


def test_batch_size_names_and_patterns(batch):
    assert len(batch) == 20
    assert [p.name for p in batch] == list(PALETTE_NAMES)
    assert [p.pattern for p in batch] == [PATTERNS[i % len(PATTERNS)] for i in range(20)]
    assert len({p.id for p in batch}) == 20


def test_generation_is_deterministic(batch):
    again = generate_palettes(["#3b82f6"])
    assert [p.to_dict() for p in again] == [p.to_dict() for p in batch]


def test_neutrals_share_primary_hue_and_order(batch):
    for p in batch:
        light = hsl_of(p.neutral_light)
        dark = hsl_of(p.neutral_dark)
        primary = hsl_of(p.primary)
        assert light[2] >= dark[2]
        assert light[0] == dark[0] == primary[0]
        assert light[1] <= 10 and dark[1] <= 10


def test_neutral_pair_bounds():
    light, dark = neutral_pair("#3b82f6", PaletteSettings())
    assert (light.l, dark.l) == (95, 20)
    light, dark = neutral_pair("#0a0a0a", PaletteSettings())
    assert (light.l, dark.l) == (85, 15)


def test_accessibility_report(batch):
    for p in batch:
        a = p.accessibility
        for text in (a.text_on_primary, a.text_on_secondary, a.text_on_accent):
            assert 1.0 <= text.white_contrast <= 21.0
            assert 1.0 <= text.black_contrast <= 21.0
            # white or black text always clears AA on some side
            assert text.passes_aa
        assert a.primary_on_neutral.passes_aa == (a.primary_on_neutral.contrast >= 4.5)
        assert set(a.cvd_separation) == {"protan", "deutan", "tritan"}


def test_colorblind_flag_follows_heuristic():
    strict = PaletteSettings(colorblind=ColorblindHeuristic(channel_delta=255))
    p = generate_palette(["#3b82f6"], 0, strict)
    assert p.accessibility.is_color_blind_friendly is False


def test_color_info_texts(batch):
    p = batch[0]
    for info in p.roles().values():
        assert info.name
        assert info.meaning.endswith(".")
        assert info.rgb.startswith("rgb(")
    assert "217°" in p.reasoning.brand_goals
    assert p.reasoning.accessibility_reasoning
    assert "Complementary" in p.reasoning.harmony_explanation


def test_to_dict_shape(batch):
    d = batch[0].to_dict()
    assert set(d["neutral"]) == {"light", "dark"}
    assert set(d["accessibility"]) >= {
        "textOnPrimary",
        "textOnSecondary",
        "textOnAccent",
        "primaryOnNeutral",
        "isColorBlindFriendly",
    }
    assert set(d["reasoning"]) == {"brandGoals", "accessibilityReasoning", "harmonyExplanation"}
    json.dumps(d)


def test_css_export(batch):
    css = to_css_variables(batch[0])
    assert css.startswith(":root {")
    assert f"--color-primary: {batch[0].primary.hex};" in css
    assert f"--color-neutral-light: {batch[0].neutral_light.hex};" in css
    assert f"--color-neutral-dark: {batch[0].neutral_dark.hex};" in css


def test_json_export(batch):
    data = json.loads(to_json(batch[3]))
    assert data["name"] == batch[3].name
    assert set(data["colors"]) == {"primary", "secondary", "accent", "neutralLight", "neutralDark"}


def test_extra_brand_colors_are_kept():
    p = generate_palette(["#3b82f6", "#f59e0b", "#10b981"], 1)
    assert p.brand_colors == ("#3b82f6", "#f59e0b", "#10b981")
    assert p.primary.hex == "#3b82f6"


@pytest.mark.parametrize("brand", [[], ["#111111"] * 4, ["blue"]])
def test_invalid_brand_colors(brand):
    with pytest.raises(ValueError):
        generate_palette(brand)


def test_prefilter_can_be_disabled():
    p = generate_palette(["#3b82f6"], 2, PaletteSettings(prefilter=False))
    assert p.pattern == "triadic"


def test_prefilter_shortfall_is_topped_up_with_related_colors():
    # against the #808080 neutrals only the 75% grey candidate reaches 8:1
    settings = PaletteSettings(prefilter_minimum=8.0)
    light, dark = (hsl_to_hex(*n) for n in neutral_pair("#808080", settings))
    secondary, accent = _pick_supporting("#808080", "complementary", (light, dark), settings)
    assert secondary == "#bfbfbf"
    assert accent == generate_related_color("#808080", "complementary", 0)


@pytest.mark.parametrize("brand", ["#3b82f6", "#fde68a", "#e11d48", "#10b981", "#111827"])
def test_supporting_roles_meet_target_against_neutrals(brand):
    settings = PaletteSettings()
    floor = settings.target_contrast - settings.adjuster.tolerance
    for p in generate_palettes([brand], settings=settings):
        light, dark = p.neutral_light.hex, p.neutral_dark.hex
        assert contrast_ratio(p.secondary.hex, light) >= floor, (p.pattern, p.secondary.hex)
        accent = max(contrast_ratio(p.accent.hex, light), contrast_ratio(p.accent.hex, dark))
        assert accent >= floor, (p.pattern, p.accent.hex)


def test_light_secondary_is_darkened_against_light_neutral():
    p = generate_palette(["#fde68a"], 5)
    assert p.pattern == "monochromatic"
    assert abs(contrast_ratio(p.secondary.hex, p.neutral_light.hex) - 4.5) <= 0.2


def test_adjusted_secondary_stops_near_target():
    p = generate_palette(["#3b82f6"], 0)
    assert hex_to_hsl(p.secondary.hex).l > 5
    assert abs(contrast_ratio(p.secondary.hex, p.neutral_light.hex) - 4.5) <= 0.2
