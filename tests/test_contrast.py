from __future__ import annotations

import pytest

from brand_palette import contrast
from brand_palette.colors import InvalidColorFormat
from brand_palette.contrast import (
    adaptive_colors,
    adaptive_text_color,
    color_variations,
    dynamic_styles,
    is_light_color,
    luminance,
)
from brand_palette.models import ThemeColorMap


def test_black_and_white_are_fixed_points():
    assert adaptive_text_color("#000000") == "#FFFFFF"
    assert adaptive_text_color("#FFFFFF") == "#000000"


def test_mid_grays_fall_on_either_side_of_threshold():
    assert luminance("#808080") > 0.5
    assert adaptive_text_color("#808080") == "#000000"
    assert luminance("#7F7F7F") < 0.5
    assert adaptive_text_color("#7F7F7F") == "#FFFFFF"


def test_luminance_of_exactly_half_is_not_light(monkeypatch):
    monkeypatch.setattr(contrast, "luminance", lambda color: 0.5)

    assert is_light_color("#123456") is False
    assert adaptive_text_color("#123456") == "#FFFFFF"


def test_green_weighs_more_than_blue():
    # Pure green reads as light, pure blue as dark.
    assert adaptive_text_color("#00FF00") == "#000000"
    assert adaptive_text_color("#0000FF") == "#FFFFFF"


def test_resolver_is_total_over_valid_hex():
    results = set()
    for r in range(0, 256, 15):
        for g in range(0, 256, 15):
            for b in range(0, 256, 15):
                results.add(adaptive_text_color(f"#{r:02x}{g:02x}{b:02X}"))

    assert results == {"#000000", "#FFFFFF"}


def test_resolver_is_repeatable():
    assert [adaptive_text_color("#dc2626") for _ in range(3)] == ["#FFFFFF"] * 3


def test_resolver_accepts_hex_without_hash():
    assert adaptive_text_color("ffffff") == "#000000"


@pytest.mark.parametrize("value", ["#FFF", "#ZZZZZZ", "", "rgb(0,0,0)"])
def test_resolver_fails_closed_on_malformed_input(value):
    with pytest.raises(InvalidColorFormat):
        adaptive_text_color(value)


def test_adaptive_colors_for_default_theme():
    colors = adaptive_colors(ThemeColorMap())

    assert colors == {
        "primaryText": "#FFFFFF",
        "accentText": "#FFFFFF",
        "backgroundText": "#000000",
        "surfaceText": "#000000",
    }


def test_color_variations_append_alpha_suffixes():
    shades = color_variations("#dc2626")

    assert list(shades) == [50, 100, 200, 300, 400, 500, 600, 700, 800, 900]
    assert shades[50] == "#dc26260D"
    assert shades[500] == "#dc2626"
    assert shades[900] == "#dc262680"

    with pytest.raises(InvalidColorFormat):
        color_variations("#dc26")
    with pytest.raises(InvalidColorFormat):
        color_variations("#dc2626\n")


def test_color_variations_add_missing_hash():
    shades = color_variations("dc2626")

    assert shades[50] == "#dc26260D"
    assert shades[500] == "#dc2626"


def test_dynamic_styles_use_resolved_text_colors():
    theme = ThemeColorMap(primary="#dc2626", surface="#111111")
    css = dynamic_styles(theme, font_family="Inter")

    assert "--primary-color: #dc2626;" in css
    assert "--font-family: Inter;" in css
    assert ".bg-primary {\n  background-color: var(--primary-color) !important;\n  color: #FFFFFF !important;" in css
    assert ".bg-surface {\n  background-color: var(--surface-color) !important;\n  color: #FFFFFF !important;" in css
