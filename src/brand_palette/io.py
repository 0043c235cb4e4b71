from __future__ import annotations

import base64
import binascii
import io
import json
from pathlib import Path

import numpy as np
import requests
from PIL import Image, UnidentifiedImageError

from .models import ExtractionResult


class ImageAccessError(RuntimeError):
    """The image could not be decoded or its pixels could not be read."""


def read_image_rgba(image: str | Path | bytes, timeout: float = 10.0) -> np.ndarray:
    if isinstance(image, (bytes, bytearray)):
        return _decode_bytes(bytes(image))

    path_str = str(image)
    if path_str.startswith("data:"):
        return _decode_bytes(_data_url_payload(path_str))

    if path_str.startswith(("http://", "https://")):
        try:
            response = requests.get(path_str, timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise ImageAccessError(f"could not fetch image {path_str}: {exc}") from exc
        return _decode_bytes(response.content)

    path = Path(image)
    if not path.exists():
        raise ImageAccessError(f"image file does not exist: {path}")
    try:
        with Image.open(path) as opened:
            return image_to_rgba(opened)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
        raise ImageAccessError(f"could not decode image {path}: {exc}") from exc


def image_to_rgba(image: Image.Image) -> np.ndarray:
    rgba = image.convert("RGBA")
    return np.asarray(rgba, dtype=np.uint8)


def _decode_bytes(payload: bytes) -> np.ndarray:
    try:
        with Image.open(io.BytesIO(payload)) as opened:
            return image_to_rgba(opened)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
        raise ImageAccessError(f"could not decode image bytes: {exc}") from exc


def _data_url_payload(data_url: str) -> bytes:
    header, _, encoded = data_url.partition(",")
    if not encoded or ";base64" not in header:
        raise ImageAccessError("only base64 data URLs are supported")
    try:
        return base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ImageAccessError(f"invalid base64 data URL: {exc}") from exc


def write_result_json(result: ExtractionResult, output_path: str | Path) -> None:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = json.dumps(result.to_dict(), indent=2)
    path.write_text(payload + "\n", encoding="utf-8")
