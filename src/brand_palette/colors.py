from __future__ import annotations

import math
import re

from .models import RGB

_HEX_PATTERN = re.compile(r"#?[0-9A-Fa-f]{6}")


class InvalidColorFormat(ValueError):
    """Raised when a color string is not a 6-digit hex value."""


def parse_hex(value: str) -> RGB:
    if not isinstance(value, str) or not _HEX_PATTERN.fullmatch(value):
        raise InvalidColorFormat(f"invalid hex color {value!r}")

    normalized = value[1:] if value.startswith("#") else value
    return (
        int(normalized[0:2], 16),
        int(normalized[2:4], 16),
        int(normalized[4:6], 16),
    )


def rgb_to_hex(rgb: RGB) -> str:
    r, g, b = (clamp_channel(channel) for channel in rgb)
    return f"#{r:02X}{g:02X}{b:02X}"


def normalize_hex(value: str) -> str:
    return rgb_to_hex(parse_hex(value))


def clamp_channel(value: float) -> int:
    return int(min(255, max(0, round_half_up(value))))


def round_half_up(value: float) -> int:
    # Matches Math.round for the non-negative channel values handled here.
    return int(math.floor(value + 0.5))


def euclidean_distance(a: RGB, b: RGB) -> float:
    return math.sqrt(
        (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2 + (a[2] - b[2]) ** 2
    )
