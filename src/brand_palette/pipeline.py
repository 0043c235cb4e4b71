from __future__ import annotations

import dataclasses
import logging
from typing import Any

import numpy as np

from .config import PaletteSettings
from .io import ImageAccessError
from .models import ExtractionResult, ThemeColorMap
from .sampling import (
    PillowPixelSource,
    PixelSource,
    as_rgba_buffer,
    quantize,
    resolve_stride,
    sample_pixels,
)
from .scoring import score_buckets
from .selection import select_palette

log = logging.getLogger(__name__)


class PaletteExtractor:
    def __init__(
        self,
        pixel_source: PixelSource | None = None,
        settings: PaletteSettings | None = None,
    ) -> None:
        self.settings = settings or PaletteSettings()
        self.pixel_source = pixel_source or PillowPixelSource(
            request_timeout=self.settings.request_timeout
        )

    def extract(self, image: Any) -> ExtractionResult:
        try:
            buffer = self.pixel_source.decode(image)
        except ImageAccessError as exc:
            log.warning("Could not read logo pixels, keeping configured colors: %s", exc)
            return ExtractionResult(palette=(), warnings=["image_access_failed"])

        return self.extract_buffer(buffer)

    def extract_buffer(self, buffer: np.ndarray) -> ExtractionResult:
        settings = self.settings
        buffer = as_rgba_buffer(buffer)
        pixel_count = int(buffer.shape[0]) * int(buffer.shape[1])
        stride = resolve_stride(
            pixel_count,
            stride=settings.stride,
            target_samples=settings.target_samples,
        )

        samples = sample_pixels(buffer, stride=stride, alpha_threshold=settings.alpha_threshold)
        warnings: list[str] = []
        if samples.shape[0] == 0:
            warnings.append("no_opaque_pixels")

        buckets = quantize(samples, step=settings.quantization_step)
        candidates = score_buckets(buckets)
        palette = select_palette(
            candidates,
            min_distance=settings.min_distance,
            max_colors=settings.max_colors,
        )
        if len(palette) == 1:
            warnings.append("single_color_palette")

        log.debug(
            "Sampled %d of %d pixels (stride %d) into %d buckets, palette=%s",
            samples.shape[0],
            pixel_count,
            stride,
            len(buckets),
            list(palette),
        )

        return ExtractionResult(
            palette=palette,
            candidates=tuple(candidates),
            sample_count=int(samples.shape[0]),
            stride=stride,
            warnings=warnings,
        )


def apply_to_theme(theme: ThemeColorMap, result: ExtractionResult) -> ThemeColorMap:
    """Promote the first two palette colors into the theme's brand slots.

    Slots without a matching palette entry keep their current value.
    """
    updates: dict[str, str] = {}
    if result.primary is not None:
        updates["primary"] = result.primary
    if result.secondary is not None:
        updates["secondary"] = result.secondary
    if not updates:
        return theme
    return dataclasses.replace(theme, **updates)
