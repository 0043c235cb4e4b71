from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Mapping

RGB = tuple[int, int, int]


@dataclass
class ColorBucket:
    key: RGB
    sum_r: int = 0
    sum_g: int = 0
    sum_b: int = 0
    count: int = 0


@dataclass(frozen=True)
class ScoredColor:
    avg_r: int
    avg_g: int
    avg_b: int
    count: int
    score: float

    @property
    def rgb(self) -> RGB:
        return (self.avg_r, self.avg_g, self.avg_b)

    @property
    def hex(self) -> str:
        return f"#{self.avg_r:02X}{self.avg_g:02X}{self.avg_b:02X}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "hex": self.hex,
            "rgb": list(self.rgb),
            "count": int(self.count),
            "score": float(self.score),
        }


# Slot name as used by the website templates -> dataclass attribute.
THEME_SLOTS: dict[str, str] = {
    "primary": "primary",
    "primaryDark": "primary_dark",
    "primaryLight": "primary_light",
    "secondary": "secondary",
    "accent": "accent",
    "background": "background",
    "surface": "surface",
    "text": "text",
    "textLight": "text_light",
    "success": "success",
    "warning": "warning",
    "error": "error",
}


@dataclass(frozen=True)
class ThemeColorMap:
    primary: str = "#6366f1"
    primary_dark: str = "#4f46e5"
    primary_light: str = "#8b5cf6"
    secondary: str = "#06b6d4"
    accent: str = "#4f46e5"
    background: str = "#ffffff"
    surface: str = "#f8fafc"
    text: str = "#0f172a"
    text_light: str = "#64748b"
    success: str = "#10b981"
    warning: str = "#f59e0b"
    error: str = "#ef4444"

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ThemeColorMap":
        """Build a map from camelCase or snake_case slot names.

        Unknown keys are ignored and missing slots keep their defaults.
        """
        values: dict[str, str] = {}
        attributes = {f.name for f in fields(cls)}
        for key, value in payload.items():
            attr = THEME_SLOTS.get(key, key)
            if attr in attributes and value:
                values[attr] = str(value)
        return cls(**values)

    @classmethod
    def from_website_config(cls, config: Mapping[str, Any]) -> "ThemeColorMap":
        """Resolve each slot from ``colors.<slot>``, then ``<slot>_color``."""
        nested = config.get("colors") or {}
        values: dict[str, str] = {}
        for slot, attr in THEME_SLOTS.items():
            value = nested.get(slot) or config.get(f"{attr}_color")
            if value:
                values[attr] = str(value)
        return cls(**values)

    def to_dict(self) -> dict[str, str]:
        return {slot: getattr(self, attr) for slot, attr in THEME_SLOTS.items()}


@dataclass(frozen=True)
class ExtractionResult:
    palette: tuple[str, ...]
    candidates: tuple[ScoredColor, ...] = ()
    sample_count: int = 0
    stride: int = 1
    warnings: list[str] = field(default_factory=list)

    @property
    def primary(self) -> str | None:
        return self.palette[0] if self.palette else None

    @property
    def secondary(self) -> str | None:
        return self.palette[1] if len(self.palette) > 1 else None

    @property
    def suggestions(self) -> tuple[str, ...]:
        return self.palette[2:]

    def website_config_updates(self) -> dict[str, str]:
        updates: dict[str, str] = {}
        if self.primary is not None:
            updates["primary_color"] = self.primary
        if self.secondary is not None:
            updates["secondary_color"] = self.secondary
        return updates

    def to_dict(self) -> dict[str, Any]:
        return {
            "palette": list(self.palette),
            "primary": self.primary,
            "secondary": self.secondary,
            "suggestions": list(self.suggestions),
            "candidates": [candidate.to_dict() for candidate in self.candidates],
            "sample_count": int(self.sample_count),
            "stride": int(self.stride),
            "warnings": list(self.warnings),
        }
