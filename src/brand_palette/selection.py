from __future__ import annotations

from typing import Iterable

from .colors import euclidean_distance
from .models import RGB, ScoredColor

MIN_DISTANCE = 50.0
MAX_COLORS = 4


def select_palette(
    candidates: Iterable[ScoredColor],
    min_distance: float = MIN_DISTANCE,
    max_colors: int = MAX_COLORS,
) -> tuple[str, ...]:
    """Greedily keep ranked candidates that are far enough from every kept color."""
    accepted: list[RGB] = []
    palette: list[str] = []

    for candidate in candidates:
        if len(palette) >= max_colors:
            break
        if any(euclidean_distance(candidate.rgb, kept) < min_distance for kept in accepted):
            continue
        accepted.append(candidate.rgb)
        palette.append(candidate.hex)

    return tuple(palette)
