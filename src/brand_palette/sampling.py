from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

import numpy as np
from PIL import Image

from .io import ImageAccessError, image_to_rgba, read_image_rgba
from .models import ColorBucket

DEFAULT_STRIDE = 10
QUANTIZATION_STEP = 24
ALPHA_THRESHOLD = 128


class PixelSource(Protocol):
    def decode(self, image: Any) -> np.ndarray:
        """Return an (H, W, 4) uint8 RGBA buffer for the given image."""


@dataclass
class PillowPixelSource:
    request_timeout: float = 10.0

    def decode(self, image: Any) -> np.ndarray:
        if isinstance(image, np.ndarray):
            return as_rgba_buffer(image)
        if isinstance(image, Image.Image):
            return image_to_rgba(image)
        if isinstance(image, (str, Path, bytes, bytearray)):
            return read_image_rgba(image, timeout=self.request_timeout)
        raise ImageAccessError(f"unsupported image input: {type(image).__name__}")


def as_rgba_buffer(pixels: np.ndarray) -> np.ndarray:
    if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
        raise ImageAccessError("pixel buffer must have shape (H, W, 3) or (H, W, 4)")

    buffer = np.asarray(pixels, dtype=np.uint8)
    if buffer.shape[2] == 3:
        alpha = np.full(buffer.shape[:2] + (1,), 255, dtype=np.uint8)
        buffer = np.concatenate([buffer, alpha], axis=2)
    return buffer


def resolve_stride(
    pixel_count: int,
    stride: int = DEFAULT_STRIDE,
    target_samples: int | None = None,
) -> int:
    if target_samples:
        return max(1, math.ceil(pixel_count / int(target_samples)))
    return max(1, int(stride))


def sample_pixels(
    buffer: np.ndarray,
    stride: int = DEFAULT_STRIDE,
    alpha_threshold: int = ALPHA_THRESHOLD,
) -> np.ndarray:
    """Take every ``stride``-th pixel and drop the effectively transparent ones.

    Returns an (N, 4) uint8 array in buffer order.
    """
    flat = as_rgba_buffer(buffer).reshape(-1, 4)
    sampled = flat[:: max(1, int(stride))]
    return sampled[sampled[:, 3] >= alpha_threshold]


def quantize(samples: np.ndarray, step: int = QUANTIZATION_STEP) -> list[ColorBucket]:
    """Group samples into buckets keyed by each channel rounded to ``step``.

    Buckets come back in the order their first sample appeared.
    """
    if samples.shape[0] == 0:
        return []

    rgb = samples[:, :3].astype(np.int64)
    keys = (np.floor(rgb / float(step) + 0.5) * step).astype(np.int64)

    unique_keys, first_index, inverse = np.unique(
        keys, axis=0, return_index=True, return_inverse=True
    )
    inverse = inverse.reshape(-1)

    sums = np.zeros((unique_keys.shape[0], 3), dtype=np.int64)
    np.add.at(sums, inverse, rgb)
    counts = np.bincount(inverse, minlength=unique_keys.shape[0])

    buckets: list[ColorBucket] = []
    for idx in np.argsort(first_index, kind="stable"):
        key = unique_keys[idx]
        buckets.append(
            ColorBucket(
                key=(int(key[0]), int(key[1]), int(key[2])),
                sum_r=int(sums[idx][0]),
                sum_g=int(sums[idx][1]),
                sum_b=int(sums[idx][2]),
                count=int(counts[idx]),
            )
        )
    return buckets
