from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaletteSettings(BaseSettings):
    # ---- Sampling ----
    stride: int = Field(default=10, ge=1)           # pixels skipped between samples
    target_samples: Optional[int] = Field(default=None, ge=1)  # overrides stride when set
    alpha_threshold: int = Field(default=128, ge=0, le=255)

    # ---- Quantization / selection ----
    quantization_step: int = Field(default=24, ge=1)
    min_distance: float = Field(default=50.0, ge=0.0)
    max_colors: int = Field(default=4, ge=1)

    # ---- Remote images ----
    request_timeout: float = Field(default=10.0, gt=0.0)

    model_config = SettingsConfigDict(
        env_prefix="BRAND_PALETTE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def get_settings() -> PaletteSettings:
    return PaletteSettings()
