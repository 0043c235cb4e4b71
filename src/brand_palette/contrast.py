"""Foreground color selection for arbitrary template background colors.

Every website template resolves its text colors through this module so the
luminance rule lives in exactly one place.
"""

from __future__ import annotations

from .colors import parse_hex
from .models import ThemeColorMap

DARK_TEXT = "#000000"
LIGHT_TEXT = "#FFFFFF"
LIGHT_THRESHOLD = 0.5

# Tint scale suffixes, appended to the base hex as an alpha channel.
_VARIATION_SUFFIXES: dict[int, str] = {
    50: "0D",
    100: "1A",
    200: "33",
    300: "4D",
    400: "66",
    500: "",
    600: "CC",
    700: "B3",
    800: "99",
    900: "80",
}


def luminance(color: str) -> float:
    r, g, b = parse_hex(color)
    return (0.299 * r + 0.587 * g + 0.114 * b) / 255


def is_light_color(color: str) -> bool:
    return luminance(color) > LIGHT_THRESHOLD


def adaptive_text_color(background: str) -> str:
    """Return black text for light backgrounds and white text otherwise.

    Raises ``InvalidColorFormat`` for anything that is not a 6-digit hex color.
    """
    return DARK_TEXT if is_light_color(background) else LIGHT_TEXT


def adaptive_colors(theme: ThemeColorMap) -> dict[str, str]:
    return {
        "primaryText": adaptive_text_color(theme.primary),
        "accentText": adaptive_text_color(theme.accent),
        "backgroundText": adaptive_text_color(theme.background),
        "surfaceText": adaptive_text_color(theme.surface),
    }


def color_variations(base_color: str) -> dict[int, str]:
    parse_hex(base_color)
    if not base_color.startswith("#"):
        base_color = f"#{base_color}"
    return {shade: f"{base_color}{suffix}" for shade, suffix in _VARIATION_SUFFIXES.items()}


def dynamic_styles(
    theme: ThemeColorMap,
    font_family: str = "Poppins, -apple-system, BlinkMacSystemFont, sans-serif",
) -> str:
    text = adaptive_colors(theme)
    return f"""\
:root {{
  --primary-color: {theme.primary};
  --primary-dark: {theme.primary_dark};
  --primary-light: {theme.primary_light};
  --accent-color: {theme.accent};
  --background-color: {theme.background};
  --surface-color: {theme.surface};
  --text-color: {theme.text};
  --text-light-color: {theme.text_light};
  --font-family: {font_family};
}}

* {{
  font-family: var(--font-family) !important;
}}

.btn-primary {{
  background-color: var(--primary-color) !important;
  color: {text["primaryText"]} !important;
}}

.btn-primary:hover {{
  background-color: var(--primary-dark) !important;
}}

.text-primary {{
  color: var(--primary-color) !important;
}}

.bg-primary {{
  background-color: var(--primary-color) !important;
  color: {text["primaryText"]} !important;
}}

.bg-accent {{
  background-color: var(--accent-color) !important;
  color: {text["accentText"]} !important;
}}

.bg-surface {{
  background-color: var(--surface-color) !important;
  color: {text["surfaceText"]} !important;
}}

.border-primary {{
  border-color: var(--primary-color) !important;
}}
"""
