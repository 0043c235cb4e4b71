from .colors import InvalidColorFormat
from .contrast import adaptive_colors, adaptive_text_color, is_light_color
from .io import ImageAccessError
from .models import ExtractionResult, ScoredColor, ThemeColorMap
from .pipeline import PaletteExtractor, apply_to_theme
from .sampling import PillowPixelSource, PixelSource

__all__ = [
    "ExtractionResult",
    "ImageAccessError",
    "InvalidColorFormat",
    "PaletteExtractor",
    "PillowPixelSource",
    "PixelSource",
    "ScoredColor",
    "ThemeColorMap",
    "adaptive_colors",
    "adaptive_text_color",
    "apply_to_theme",
    "is_light_color",
]
