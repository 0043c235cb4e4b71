from __future__ import annotations

from brand_palette.models import ExtractionResult, ThemeColorMap


def test_theme_defaults_cover_all_slots():
    payload = ThemeColorMap().to_dict()

    assert list(payload) == [
        "primary",
        "primaryDark",
        "primaryLight",
        "secondary",
        "accent",
        "background",
        "surface",
        "text",
        "textLight",
        "success",
        "warning",
        "error",
    ]
    assert payload["primary"] == "#6366f1"
    assert payload["textLight"] == "#64748b"


def test_theme_from_website_config_prefers_nested_colors():
    theme = ThemeColorMap.from_website_config(
        {
            "primary_color": "#dc2626",
            "secondary_color": "#b91c1c",
            "text_light_color": "#999999",
            "colors": {"accent": "#123456", "secondary": "#00aa00"},
        }
    )

    assert theme.primary == "#dc2626"
    assert theme.secondary == "#00aa00"
    assert theme.accent == "#123456"
    assert theme.text_light == "#999999"
    assert theme.surface == "#f8fafc"


def test_theme_from_dict_accepts_both_naming_styles():
    theme = ThemeColorMap.from_dict(
        {"primaryDark": "#000001", "text_light": "#000002", "bogus": "#000003", "accent": ""}
    )

    assert theme.primary_dark == "#000001"
    assert theme.text_light == "#000002"
    assert theme.accent == "#4f46e5"


def test_extraction_result_slots():
    result = ExtractionResult(palette=("#111111", "#222222", "#333333", "#444444"))

    assert result.primary == "#111111"
    assert result.secondary == "#222222"
    assert result.suggestions == ("#333333", "#444444")

    empty = ExtractionResult(palette=())
    assert empty.primary is None
    assert empty.secondary is None
    assert empty.suggestions == ()
