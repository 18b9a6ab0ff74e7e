import re

import numpy as np
import pytest

from palette_studio.variants import color_variants, generate_shades, generate_tints, lightness_steps

HSL = re.compile(r"hsl\((\d+(?:\.\d+)?), (\d+(?:\.\d+)?)%, (\d+(?:\.\d+)?)%\)")


def parse(s):
    m = HSL.fullmatch(s)
    assert m, s
    return tuple(float(x) for x in m.groups())


def test_tints_reference():
    assert generate_tints("#3b82f6", 3) == [
        "hsl(217, 91%, 68.75%)",
        "hsl(217, 91%, 77.5%)",
        "hsl(217, 91%, 86.25%)",
    ]


def test_shades_reference():
    assert generate_shades("#3b82f6", 3) == [
        "hsl(217, 91%, 46.25%)",
        "hsl(217, 91%, 32.5%)",
        "hsl(217, 91%, 18.75%)",
    ]


@pytest.mark.parametrize("base", ["#3b82f6", "#e11d48", "#222222", "#10b981"])
@pytest.mark.parametrize("count", [1, 4, 10, 20])
def test_monotonic_lightness(base, count):
    tints = [parse(t) for t in generate_tints(base, count)]
    shades = [parse(s) for s in generate_shades(base, count)]
    assert len(tints) == len(shades) == count

    tl = np.array([t[2] for t in tints])
    sl = np.array([s[2] for s in shades])
    assert np.all(np.diff(tl) > 0)
    assert np.all(np.diff(sl) < 0)
    assert np.all(tl < 95) and np.all(sl > 5)

    # hue and saturation never move
    assert len({t[:2] for t in tints + shades}) == 1


def test_zero_count_is_empty():
    assert generate_tints("#3b82f6", 0) == []
    assert generate_shades("#3b82f6", 0) == []


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        generate_tints("#3b82f6", -1)


def test_invalid_base_rejected():
    with pytest.raises(ValueError):
        generate_shades("blue", 2)


def test_lightness_steps_excludes_endpoints():
    assert np.allclose(lightness_steps(0, 100, 3), [25, 50, 75])


def test_color_variants_payload():
    data = color_variants("3B82F6", 2, 1)
    assert data["base"] == "#3b82f6"
    assert data["formats"]["rgb"] == "rgb(59, 130, 246)"
    assert len(data["tints"]) == 2
    assert len(data["shades"]) == 1
