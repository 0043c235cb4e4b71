from __future__ import annotations

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, field_validator
from starlette.concurrency import run_in_threadpool

from .colors import InvalidColorFormat, normalize_hex
from .config import PaletteSettings
from .contrast import (
    adaptive_colors,
    adaptive_text_color,
    dynamic_styles,
    is_light_color,
    luminance,
)
from .models import ThemeColorMap
from .pipeline import PaletteExtractor, apply_to_theme


class ExtractRequest(BaseModel):
    image_url: str = Field(..., description="HTTP(S) or base64 data URL of the logo")
    stride: int | None = Field(default=None, ge=1, description="Pixels between samples")
    target_samples: int | None = Field(
        default=None,
        ge=1,
        description="Derive the stride from the image area instead of a fixed value",
    )
    theme: dict[str, str] | None = Field(
        default=None,
        description="Current theme colors; only primary/secondary are replaced",
    )

    @field_validator("image_url")
    @classmethod
    def _check_remote(cls, value: str) -> str:
        # Server-side paths are never opened on behalf of a client.
        if not value.startswith(("http://", "https://", "data:")):
            raise ValueError("image_url must be an http(s) or data: URL")
        return value


class ExtractResponse(BaseModel):
    palette: list[str]
    primary: str | None
    secondary: str | None
    suggestions: list[str]
    warnings: list[str]
    theme: dict[str, str]
    website_config: dict[str, str]


class ContrastRequest(BaseModel):
    background: str = Field(..., description="Background color as #RRGGBB")

    @field_validator("background")
    @classmethod
    def _check_hex(cls, value: str) -> str:
        return normalize_hex(value)


class ContrastResponse(BaseModel):
    background: str
    text_color: str
    is_light: bool
    luminance: float


class StylesRequest(BaseModel):
    colors: dict[str, str] = Field(default_factory=dict)
    font_family: str = "Poppins, -apple-system, BlinkMacSystemFont, sans-serif"


class StylesResponse(BaseModel):
    css: str
    adaptive_colors: dict[str, str]


app = FastAPI(
    title="Brand Palette API",
    version="1.0.0",
    description="Extract brand colors from a logo and resolve legible text colors.",
)


def _build_extractor(stride: int | None, target_samples: int | None) -> PaletteExtractor:
    overrides: dict[str, int] = {}
    if stride is not None:
        overrides["stride"] = stride
    if target_samples is not None:
        overrides["target_samples"] = target_samples
    return PaletteExtractor(settings=PaletteSettings(**overrides))


@app.post("/extract", response_model=ExtractResponse)
async def extract_palette(payload: ExtractRequest) -> ExtractResponse:
    extractor = _build_extractor(payload.stride, payload.target_samples)
    try:
        result = await run_in_threadpool(extractor.extract, payload.image_url)
    except Exception as exc:
        raise HTTPException(
            status_code=400, detail=f"failed_to_extract_colors: {exc}"
        ) from exc

    theme = apply_to_theme(ThemeColorMap.from_dict(payload.theme or {}), result)
    return ExtractResponse(
        palette=list(result.palette),
        primary=result.primary,
        secondary=result.secondary,
        suggestions=list(result.suggestions),
        warnings=result.warnings,
        theme=theme.to_dict(),
        website_config=result.website_config_updates(),
    )


@app.post("/contrast", response_model=ContrastResponse)
async def resolve_contrast(payload: ContrastRequest) -> ContrastResponse:
    text_color = adaptive_text_color(payload.background)
    return ContrastResponse(
        background=payload.background,
        text_color=text_color,
        is_light=is_light_color(payload.background),
        luminance=luminance(payload.background),
    )


@app.post("/theme/styles", response_model=StylesResponse)
async def theme_styles(payload: StylesRequest) -> StylesResponse:
    theme = ThemeColorMap.from_dict(payload.colors)
    try:
        return StylesResponse(
            css=dynamic_styles(theme, font_family=payload.font_family),
            adaptive_colors=adaptive_colors(theme),
        )
    except InvalidColorFormat as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
